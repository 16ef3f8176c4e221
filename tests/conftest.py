"""
Pytest Configuration File

This module provides fixtures and configuration for all tests.
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add app directory to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.main import app
from app.features.photosubmit.models import FileHandle


@pytest.fixture
def test_client():
    """Fixture for FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def make_file():
    """Factory for in-memory photos"""
    def _make(name: str = "photo.jpg", size: int = 1024, content_type: str = "image/jpeg") -> FileHandle:
        return FileHandle(name=name, size=size, content_type=content_type, content=b"x" * min(size, 64))
    return _make


@pytest.fixture
def valid_fields():
    """Fixture providing a complete set of form fields"""
    return {
        "name": "Ana Ruiz",
        "email": "ana@x.com",
        "category": "ceremony",
        "message": "Lovely day",
    }
