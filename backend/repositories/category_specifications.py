"""
Category Specifications

Concrete specifications for querying the category table, plus the
predicate builder that turns free-text search terms into a filter.
"""

from typing import Optional

from database import casefold
from models import CategoryModel
from .specifications import Specification

_LIKE_ESCAPE = '\\'


def _escape_like(term: str) -> str:
    return (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace('%', _LIKE_ESCAPE + '%')
        .replace('_', _LIKE_ESCAPE + '_')
    )


class ContainsIgnoringCaseSpec(Specification[CategoryModel]):
    """Specification for categories whose column contains a term, ignoring case."""

    def __init__(self, field: str, term: str):
        """
        Initialize specification.

        Args:
            field: CategoryModel column name (e.g. 'name')
            term: Text to look for
        """
        if not hasattr(CategoryModel, field):
            raise ValueError(f"Unknown category field: {field}")
        self.field = field
        self.term = term

    def is_satisfied_by(self, category: CategoryModel) -> bool:
        """Check if the column value contains the term."""
        value = getattr(category, self.field)
        return value is not None and self.term.casefold() in value.casefold()

    def to_sql_filter(self):
        """Convert to SQL filter (LIKE over case-folded column and term)."""
        column = getattr(CategoryModel, self.field)
        pattern = f"%{_escape_like(self.term.casefold())}%"
        return casefold(column).like(pattern, escape=_LIKE_ESCAPE)


class NameContainsSpec(ContainsIgnoringCaseSpec):
    """Specification for categories whose name contains a term."""

    def __init__(self, term: str):
        super().__init__('name', term)


class DescriptionContainsSpec(ContainsIgnoringCaseSpec):
    """Specification for categories whose description contains a term."""

    def __init__(self, term: str):
        super().__init__('description', term)


def category_terms_spec(terms: Optional[str]) -> Optional[Specification[CategoryModel]]:
    """
    Build the search filter for free-text terms.

    Args:
        terms: Raw search text from the query

    Returns:
        name-contains OR description-contains, or None when terms are blank
        (no filtering)
    """
    if terms is None or not terms.strip():
        return None
    return NameContainsSpec(terms) | DescriptionContainsSpec(terms)
