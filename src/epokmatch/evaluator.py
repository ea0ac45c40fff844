"""Selection state machine and match evaluation for one round."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from .models import FailureSignal, MatchResult, RoundData, SessionState

FAILURE_SIGNAL_SECONDS = 0.5

Clock = Callable[[], float]

logger = logging.getLogger(__name__)


class MatchEvaluator:
    """Applies learner selections to a session state.

    At most one era and one slot are selected at a time. Selecting the
    current item again clears it. As soon as both are set the pair is
    evaluated and both selections are cleared, whatever the outcome.
    """

    def __init__(self, state: SessionState, clock: Clock = time.monotonic) -> None:
        self.state = state
        self._clock = clock

    def select_era(self, round_data: RoundData, era_id: str) -> MatchResult | None:
        """Toggle era selection and evaluate when a slot is also selected."""
        if era_id not in round_data.era_order:
            logger.debug("Ignoring unknown era %r", era_id)
            return None
        if self.state.selected_era_id == era_id:
            self.state.selected_era_id = None
            return None
        self.state.selected_era_id = era_id
        return self._evaluate_if_ready(round_data)

    def select_slot(self, round_data: RoundData, slot_index: int) -> MatchResult | None:
        """Toggle slot selection and evaluate when an era is also selected."""
        if not 0 <= slot_index < round_data.slot_count:
            logger.debug("Ignoring unknown slot %r", slot_index)
            return None
        if slot_index in self.state.matched_slots:
            logger.debug("Ignoring already matched slot %d", slot_index)
            return None
        if self.state.selected_slot_index == slot_index:
            self.state.selected_slot_index = None
            return None
        self.state.selected_slot_index = slot_index
        return self._evaluate_if_ready(round_data)

    def clear_selection(self) -> None:
        """Drop both pending selections without evaluating."""
        self.state.selected_era_id = None
        self.state.selected_slot_index = None

    def _evaluate_if_ready(self, round_data: RoundData) -> MatchResult | None:
        if self.state.selected_era_id is None or self.state.selected_slot_index is None:
            return None
        return self.evaluate(round_data)

    def evaluate(self, round_data: RoundData) -> MatchResult:
        """Score the current era/slot selection and clear both selections."""
        era_id = self.state.selected_era_id
        slot_index = self.state.selected_slot_index
        if era_id is None or slot_index is None:
            raise RuntimeError("Both an era and a slot must be selected before evaluating.")

        self.state.attempts += 1
        correct = round_data.pairs[slot_index].era_id == era_id
        if correct:
            self.state.matched_slots.add(slot_index)
            self.state.correct += 1
            logger.debug("Matched era %s to slot %d", era_id, slot_index)
        else:
            self.state.failure = FailureSignal(slot_index=slot_index, raised_at=self._clock())
            logger.debug("Mismatch: era %s is not slot %d", era_id, slot_index)

        self.state.selected_era_id = None
        self.state.selected_slot_index = None
        return MatchResult(era_id=era_id, slot_index=slot_index, correct=correct)

    def active_failure(self, now: float | None = None) -> int | None:
        """Return the slot whose failure signal has not yet expired."""
        failure = self.state.failure
        if failure is None:
            return None
        current = self._clock() if now is None else now
        if current - failure.raised_at >= FAILURE_SIGNAL_SECONDS:
            self.state.failure = None
            return None
        return failure.slot_index
