"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from payments_engine.engine import Engine


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def engine() -> Engine:
    """Fresh engine with an empty ledger."""
    return Engine()


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write CSV text to a temporary file and return its path."""

    def _write(content: str, name: str = "transactions.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
