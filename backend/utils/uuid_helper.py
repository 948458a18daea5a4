"""
UUID generation helper.

Category IDs and request IDs share one format: a lowercase hyphenated
UUID4 string, which fits the 36-character primary key column.
"""
import uuid


def generate_uuid() -> str:
    """
    Generate a new random identifier.

    Returns:
        str: UUID4 in canonical 36-character form
    """
    return str(uuid.uuid4())
