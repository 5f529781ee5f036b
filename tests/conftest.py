"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest
from graphql import build_schema

# Add src to Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

FIXTURES_DIR = Path(__file__).parent / "fixtures"

MINIMAL_SDL = """
type User {
  id: ID!
  name: String
}

type Query {
  user(id: ID!): User
}
"""


@pytest.fixture
def shop_schema_path() -> Path:
    """Path of the shop schema fixture (Query + Mutation, no Subscription)."""
    return FIXTURES_DIR / "shop.graphqls"


@pytest.fixture
def shop_schema(shop_schema_path):
    return build_schema(shop_schema_path.read_text(encoding="utf-8"))


@pytest.fixture
def minimal_schema():
    """Schema with only a Query root type."""
    return build_schema(MINIMAL_SDL)


@pytest.fixture
def subscription_schema():
    return build_schema(
        """
        type Query { ping: String }
        type Subscription { orderShipped(orderId: ID!): String! }
        """
    )
