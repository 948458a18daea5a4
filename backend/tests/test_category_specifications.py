"""Tests for category search specifications."""

from datetime import datetime, timezone

import pytest

from models import CategoryModel
from repositories.category_specifications import (
    ContainsIgnoringCaseSpec,
    DescriptionContainsSpec,
    NameContainsSpec,
    category_terms_spec,
)
from repositories.specifications import OrSpecification


def _model(name, description=None):
    now = datetime.now(timezone.utc)
    return CategoryModel(
        id="1", name=name, description=description, active=True,
        created_at=now, updated_at=now, deleted_at=None
    )


class TestContainsSpecs:
    def test_name_match_ignores_case(self):
        assert NameContainsSpec("FIL").is_satisfied_by(_model("Filmes"))

    def test_name_mismatch(self):
        assert not NameContainsSpec("kids").is_satisfied_by(_model("Filmes"))

    def test_missing_description_never_matches(self):
        assert not DescriptionContainsSpec("a").is_satisfied_by(_model("Filmes"))

    def test_unknown_field_is_rejected(self):
        with pytest.raises(ValueError):
            ContainsIgnoringCaseSpec("color", "red")

    def test_sql_filter_escapes_wildcards(self):
        clause = NameContainsSpec("50%_off").to_sql_filter()

        params = clause.compile().params
        assert "%50\\%\\_off%" in params.values()


class TestCategoryTermsSpec:
    @pytest.mark.parametrize("terms", [None, "", "   "])
    def test_blank_terms_mean_no_filter(self, terms):
        assert category_terms_spec(terms) is None

    def test_terms_match_name_or_description(self):
        spec = category_terms_spec("amazon")

        assert isinstance(spec, OrSpecification)
        assert spec.is_satisfied_by(_model("Amazon Originals"))
        assert spec.is_satisfied_by(_model("Originals", "Títulos de autoria da Amazon"))
        assert not spec.is_satisfied_by(_model("Kids", "Categoria para crianças"))


class TestSqlAndInMemoryAgree:
    @pytest.mark.parametrize("terms,expected_count", [
        ("DOCUMENTÁRIOS", 1),
        ("documentários", 1),
        ("CRIANÇAS", 1),
        ("TÍTULOS", 2),
        ("ORIGINALS", 2),
        ("%", 0),
    ])
    def test_same_rows_match(self, db_session, seeded_categories, terms, expected_count):
        spec = category_terms_spec(terms)
        rows = db_session.query(CategoryModel).all()

        in_memory = {row.id for row in rows if spec.is_satisfied_by(row)}
        in_sql = {row.id for row in db_session.query(CategoryModel).filter(spec.to_sql_filter())}

        assert in_sql == in_memory
        assert len(in_sql) == expected_count
