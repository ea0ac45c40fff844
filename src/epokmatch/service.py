"""Application service exposing the matching exercise to a front-end."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass

from .content_loader import load_bank
from .evaluator import Clock, MatchEvaluator
from .models import ContentBank, Era, HintSlot, MatchResult, RoundSummary
from .session import SessionTracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EraOption:
    """One era as shown in the era column."""

    era_id: str
    name: str
    selected: bool


@dataclass(frozen=True)
class HintOption:
    """One clue as shown in the clue column."""

    slot_index: int
    hint: str
    selected: bool
    matched: bool
    failed: bool


@dataclass(frozen=True)
class ExerciseView:
    """Snapshot of everything a front-end needs to render one frame."""

    round: int
    attempts: int
    correct: int
    elapsed_seconds: int
    eras: tuple[EraOption, ...]
    hints: tuple[HintOption, ...]
    complete: bool
    help_visible: bool


class MatchExercise:
    """Coordinates the content bank, round builder, evaluator and tracker."""

    def __init__(
        self,
        bank: ContentBank | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        """Initialize exercise at round 1.

        ``seed`` is only used when no ``rng`` is given.
        """
        self.bank = bank if bank is not None else load_bank()
        self.tracker = SessionTracker(self.bank, rng if rng is not None else random.Random(seed), clock)
        self.evaluator = MatchEvaluator(self.tracker.state, clock)
        self.help_visible = False

    @property
    def round(self) -> int:
        return self.tracker.state.round

    @property
    def attempts(self) -> int:
        return self.tracker.state.attempts

    @property
    def correct(self) -> int:
        return self.tracker.state.correct

    @property
    def matched_slots(self) -> frozenset[int]:
        return frozenset(self.tracker.state.matched_slots)

    @property
    def selected_era_id(self) -> str | None:
        return self.tracker.state.selected_era_id

    @property
    def selected_slot_index(self) -> int | None:
        return self.tracker.state.selected_slot_index

    @property
    def era_order(self) -> tuple[str, ...]:
        return self.tracker.round_data.era_order

    @property
    def hint_slots(self) -> tuple[HintSlot, ...]:
        return self.tracker.round_data.hint_slots

    def era_name(self, era_id: str) -> str:
        """Return display name for an era id."""
        era = self.bank.get(era_id)
        if era is None:
            raise KeyError(era_id)
        return era.name

    def elapsed_seconds(self) -> int:
        return self.tracker.elapsed_seconds()

    def is_round_complete(self) -> bool:
        return self.tracker.is_round_complete()

    def failed_slot(self) -> int | None:
        """Return the slot to flag as a recent miss, if still within its window."""
        return self.evaluator.active_failure()

    def summary(self) -> RoundSummary:
        return self.tracker.summary()

    def answer_key(self) -> tuple[Era, ...]:
        """Return every era with all of its hints, in bank order."""
        return self.bank.eras

    def select_era(self, era_id: str) -> MatchResult | None:
        """Select or deselect an era; returns the evaluation if one fired."""
        return self.evaluator.select_era(self.tracker.round_data, era_id)

    def select_slot(self, slot_index: int) -> MatchResult | None:
        """Select or deselect a clue slot by its stable index."""
        return self.evaluator.select_slot(self.tracker.round_data, slot_index)

    def select_era_at(self, position: int) -> MatchResult | None:
        """Select the era shown at a zero-based display position."""
        order = self.era_order
        if not 0 <= position < len(order):
            logger.debug("Ignoring era position %d", position)
            return None
        return self.select_era(order[position])

    def select_slot_at(self, position: int) -> MatchResult | None:
        """Select the clue shown at a zero-based display position."""
        order = self.tracker.round_data.slot_order
        if not 0 <= position < len(order):
            logger.debug("Ignoring slot position %d", position)
            return None
        return self.select_slot(order[position])

    def clear_selection(self) -> None:
        """Deselect the current era and clue."""
        self.evaluator.clear_selection()

    def advance_round(self) -> None:
        """Start a new round with freshly sampled clues and orders."""
        self.tracker.advance_round()

    def toggle_help(self) -> bool:
        """Flip help panel visibility and return the new value."""
        self.help_visible = not self.help_visible
        return self.help_visible

    def view(self) -> ExerciseView:
        """Return a render snapshot of the current round."""
        state = self.tracker.state
        failed = self.failed_slot()
        eras = tuple(
            EraOption(era_id=era_id, name=self.era_name(era_id), selected=state.selected_era_id == era_id)
            for era_id in self.era_order
        )
        hints = tuple(
            HintOption(
                slot_index=slot.index,
                hint=slot.hint,
                selected=state.selected_slot_index == slot.index,
                matched=slot.index in state.matched_slots,
                failed=failed == slot.index,
            )
            for slot in self.hint_slots
        )
        return ExerciseView(
            round=state.round,
            attempts=state.attempts,
            correct=state.correct,
            elapsed_seconds=self.elapsed_seconds(),
            eras=eras,
            hints=hints,
            complete=self.is_round_complete(),
            help_visible=self.help_visible,
        )
