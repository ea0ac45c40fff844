"""Core domain models for the era matching exercise."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Era:
    """One literary era with its candidate clues."""

    id: str
    name: str
    hints: tuple[str, ...]


@dataclass(frozen=True)
class ContentBank:
    """Ordered, read-only catalog of eras."""

    eras: tuple[Era, ...]

    def get(self, era_id: str) -> Era | None:
        """Return era by id."""
        for era in self.eras:
            if era.id == era_id:
                return era
        return None

    def ids(self) -> tuple[str, ...]:
        """Return era ids in bank order."""
        return tuple(era.id for era in self.eras)

    def __len__(self) -> int:
        return len(self.eras)

    def __iter__(self) -> Iterator[Era]:
        return iter(self.eras)


@dataclass(frozen=True)
class RoundPair:
    """The single clue sampled for one era in a round."""

    era_id: str
    hint: str


@dataclass(frozen=True)
class HintSlot:
    """A round pair placed in the shuffled clue column.

    ``index`` is the pair's position in bank order and stays stable for the
    whole round, whatever position the slot is displayed at.
    """

    index: int
    era_id: str
    hint: str


@dataclass(frozen=True)
class RoundData:
    """Working data for one round."""

    number: int
    pairs: tuple[RoundPair, ...]
    era_order: tuple[str, ...]
    slot_order: tuple[int, ...]

    @property
    def slot_count(self) -> int:
        return len(self.pairs)

    @property
    def hint_slots(self) -> tuple[HintSlot, ...]:
        """Return hint slots in display order."""
        return tuple(
            HintSlot(index=index, era_id=self.pairs[index].era_id, hint=self.pairs[index].hint)
            for index in self.slot_order
        )


@dataclass(frozen=True)
class FailureSignal:
    """Transient marker for a slot that was just matched wrongly."""

    slot_index: int
    raised_at: float


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one evaluated era/slot pairing."""

    era_id: str
    slot_index: int
    correct: bool


@dataclass(frozen=True)
class RoundSummary:
    """Round statistics for the completion panel."""

    round: int
    correct: int
    total: int
    attempts: int
    elapsed_seconds: int
    complete: bool


@dataclass
class SessionState:
    """Mutable state of one exercise session.

    Round-scoped fields (selections, matched slots, counters, start time and
    failure signal) are reset together on every round advance.
    """

    round: int = 1
    selected_era_id: str | None = None
    selected_slot_index: int | None = None
    matched_slots: set[int] = field(default_factory=set)
    attempts: int = 0
    correct: int = 0
    round_started_at: float = 0.0
    failure: FailureSignal | None = None
