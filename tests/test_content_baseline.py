import re

from epokmatch.content_loader import load_bank


def test_bundled_eras_have_three_or_four_hints() -> None:
    for era in load_bank():
        assert 3 <= len(era.hints) <= 4, era.id


def test_bundled_era_ids_are_plain_tokens() -> None:
    for era in load_bank():
        assert re.fullmatch(r"[a-z]+", era.id), era.id


def test_bundled_hints_are_unique_across_bank() -> None:
    hints = [hint for era in load_bank() for hint in era.hints]
    assert len(hints) == len(set(hints))


def test_bundled_names_are_unique() -> None:
    names = [era.name for era in load_bank()]
    assert len(names) == len(set(names))
