"""Pytest configuration and shared fixtures."""
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional

import pytest

# Add parent to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from objectdiff import reset_defaults


@dataclass
class Server:
    """Record used as a comparison root in tests."""
    host: str = "localhost"
    port: int = field(default=80, metadata={"categories": ["network"]})
    debug: bool = False
    tags: Optional[List[str]] = None


class Item:
    """Element with no structural equality: only the same object is identical."""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"Item({self.name!r})"


@pytest.fixture(autouse=True)
def reset_config():
    """Restore library defaults after each test."""
    yield
    reset_defaults()


@pytest.fixture
def items():
    """Three distinct reference-identity items A, B, C."""
    return Item("A"), Item("B"), Item("C")


@pytest.fixture
def users():
    """Dict-shaped records keyed by id."""
    return [
        {"id": 1, "name": "alice"},
        {"id": 2, "name": "bob"},
        {"id": 3, "name": "carol"},
    ]
