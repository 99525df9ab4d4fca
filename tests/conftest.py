"""Pytest configuration for dataknobs_validators tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


VALID_UUID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture
def valid_uuid():
    """A canonical lowercase UUID string."""
    return VALID_UUID


@pytest.fixture
def user_data():
    """A user record that passes the user schema."""
    return {
        "id": VALID_UUID,
        "email": "ada@example.com",
        "age": 36,
        "role": "admin",
        "homepage": "https://example.com/ada",
    }


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
