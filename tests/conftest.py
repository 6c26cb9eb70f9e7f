"""Root conftest - shared test configuration and sample payloads."""

import os

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("STORAGE_BACKEND", "sql")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def data_item_payload() -> dict:
    return {
        "title": "Dataset A",
        "description": "CSV file",
        "price": 100,
        "attachmentURL": "http://x",
        "dataFormat": "csv",
        "status": "active",
        "quality": "high",
        "rating": 5,
    }

@pytest.fixture
def purchaser_payload() -> dict:
    return {"name": "Alice", "price": 250, "message": "Looking for weather data"}
