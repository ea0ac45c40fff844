"""Round generation: one sampled clue per era plus shuffled display orders."""

from __future__ import annotations

import logging
import random
from typing import TypeVar

from .models import ContentBank, RoundData, RoundPair

T = TypeVar("T")

logger = logging.getLogger(__name__)


def sample_pairs(bank: ContentBank, rng: random.Random) -> tuple[RoundPair, ...]:
    """Pick one hint per era uniformly at random, in bank order."""
    return tuple(RoundPair(era_id=era.id, hint=rng.choice(era.hints)) for era in bank)


def shuffled(items: list[T], rng: random.Random) -> tuple[T, ...]:
    """Return an unbiased permutation of items without touching the input."""
    copy = list(items)
    rng.shuffle(copy)
    return tuple(copy)


def build_round(bank: ContentBank, rng: random.Random | None = None, number: int = 1) -> RoundData:
    """Build fresh round data.

    The pairs are indexed in bank order and that index is the slot key for the
    round. Era and slot display orders are drawn independently. Callers must
    build a new round every time the round number changes.
    """
    source = rng if rng is not None else random.Random()
    pairs = sample_pairs(bank, source)
    era_order = shuffled(list(bank.ids()), source)
    slot_order = shuffled(list(range(len(pairs))), source)
    logger.debug("Built round %d: eras=%s slots=%s", number, era_order, slot_order)
    return RoundData(number=number, pairs=pairs, era_order=era_order, slot_order=slot_order)
