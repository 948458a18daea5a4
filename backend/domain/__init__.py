"""
Domain Layer

This package contains the core business domain logic, separated from
persistence concerns and infrastructure.

Structure:
- aggregates/: Aggregate roots (Category) and their gateway contracts
- value_objects/: Immutable value types without identity
- validation/: Error values and the validation handlers that collect them
- result.py: Two-variant Left/Right container returned by command use cases
- pagination.py: Generic paged result container
"""
