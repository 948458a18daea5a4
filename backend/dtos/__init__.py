"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the domain model.
DTOs prevent leaking the aggregate to external APIs and allow independent evolution.

Structure:
- request/: DTOs for incoming API requests
- response/: DTOs for outgoing API responses
- internal/: Commands and outputs of the category use cases
"""
