"""Round progression and statistics for one exercise session."""

from __future__ import annotations

import logging
import math
import random
import time

from .evaluator import Clock
from .models import ContentBank, RoundData, RoundSummary, SessionState
from .rounds import build_round

logger = logging.getLogger(__name__)


class SessionTracker:
    """Owns the session state and the working data of the current round."""

    def __init__(self, bank: ContentBank, rng: random.Random | None = None, clock: Clock = time.monotonic) -> None:
        """Start round 1."""
        self.bank = bank
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock
        self.state = SessionState(round_started_at=clock())
        self.round_data: RoundData = build_round(bank, self._rng, number=self.state.round)

    def is_round_complete(self) -> bool:
        return len(self.state.matched_slots) == self.round_data.slot_count

    def elapsed_seconds(self) -> int:
        """Return whole seconds since the round started."""
        return max(0, math.floor(self._clock() - self.state.round_started_at))

    def advance_round(self) -> RoundData:
        """Reset round-scoped state and build the next round."""
        state = self.state
        state.round += 1
        state.selected_era_id = None
        state.selected_slot_index = None
        state.matched_slots = set()
        state.attempts = 0
        state.correct = 0
        state.failure = None
        state.round_started_at = self._clock()
        self.round_data = build_round(self.bank, self._rng, number=state.round)
        logger.info("Advanced to round %d", state.round)
        return self.round_data

    def summary(self) -> RoundSummary:
        return RoundSummary(
            round=self.state.round,
            correct=self.state.correct,
            total=self.round_data.slot_count,
            attempts=self.state.attempts,
            elapsed_seconds=self.elapsed_seconds(),
            complete=self.is_round_complete(),
        )
