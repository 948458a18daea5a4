import os
import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Never touch a real database file from the test suite
os.environ.setdefault('CATALOG_DATABASE_URL', 'sqlite:///:memory:')

# Now import after path is set
import pytest
from sqlalchemy.orm import sessionmaker
from unittest.mock import MagicMock

import models  # noqa: F401  registers CategoryModel
from database import Base, build_engine
from domain.aggregates.category import Category
from domain.aggregates.category_gateway import CategoryGateway
from repositories.category_gateway import SQLAlchemyCategoryGateway


@pytest.fixture
def db_engine():
    """Fresh in-memory database per test"""
    engine = build_engine('sqlite:///:memory:')
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Create in-memory database session for testing"""
    SessionLocal = sessionmaker(bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def sql_gateway(db_session):
    """CategoryGateway backed by the in-memory database"""
    return SQLAlchemyCategoryGateway(db_session)


@pytest.fixture
def gateway():
    """Mock CategoryGateway that echoes persisted categories back"""
    mock = MagicMock(spec=CategoryGateway)
    mock.create.side_effect = lambda category: category
    mock.update.side_effect = lambda category: category
    return mock


@pytest.fixture
def seeded_categories(sql_gateway):
    """Seven persisted categories, created in this order"""
    seeds = [
        ("Filmes", "A categoria mais assistida filmes"),
        ("Netflix Originals", "Títulos de autoria da Netflix"),
        ("Amazon Originals", "Títulos de autoria da Amazon"),
        ("Documentários", None),
        ("Sports", None),
        ("Kids", "Categoria para crianças"),
        ("Series", None),
    ]
    categories = []
    for name, description in seeds:
        category = Category.new_category(name, description, True)
        sql_gateway.create(category)
        categories.append(category)
    return categories
