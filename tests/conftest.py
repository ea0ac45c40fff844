from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from epokmatch.content_loader import bank_from_records  # noqa: E402
from epokmatch.models import ContentBank  # noqa: E402


class FakeClock:
    """Manually advanced clock in seconds."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_bank() -> Callable[..., ContentBank]:
    """Build a bank of eras named by the given ids, three hints each."""

    def factory(*era_ids: str) -> ContentBank:
        return bank_from_records(
            {"id": era_id, "name": era_id.upper(), "hints": [f"{era_id}-{n}" for n in range(1, 4)]}
            for era_id in era_ids
        )

    return factory
