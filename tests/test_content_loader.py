import json
from pathlib import Path

import pytest

from epokmatch.content_loader import ContentError, bank_from_records, load_bank, load_bank_from_file


def test_load_bank_contains_all_eras_in_order() -> None:
    bank = load_bank()
    assert bank.ids() == (
        "antiken",
        "medeltiden",
        "renassansen",
        "upplysningen",
        "romantiken",
        "realismen",
        "naturalismen",
        "modernismen",
    )
    era = bank.get("renassansen")
    assert era is not None
    assert era.name == "Renässansen"
    assert era.hints[2] == "Centrala namn: Shakespeare, Cervantes"


def test_load_bank_from_file_accepts_object_and_list(tmp_path: Path) -> None:
    records = [{"id": "a", "name": "A", "hints": [" one ", "two"]}, {"id": "b", "name": "B", "hints": ["x"]}]
    as_object = tmp_path / "object.json"
    as_object.write_text(json.dumps({"eras": records}), encoding="utf-8")
    as_list = tmp_path / "list.json"
    as_list.write_text(json.dumps(records), encoding="utf-8")

    for path in (as_object, as_list):
        bank = load_bank_from_file(path)
        assert bank.ids() == ("a", "b")
        assert bank.eras[0].hints == ("one", "two")


def test_single_era_bank_is_valid() -> None:
    bank = bank_from_records([{"id": "solo", "name": "Solo", "hints": ["only"]}])
    assert len(bank) == 1
    assert bank.get("missing") is None


def test_duplicate_era_id_raises() -> None:
    with pytest.raises(ContentError, match="Duplicate era id: a"):
        bank_from_records([{"id": "a", "name": "A", "hints": ["x"]}, {"id": "a", "name": "B", "hints": ["y"]}])


def test_era_without_hints_raises() -> None:
    with pytest.raises(ContentError, match="no valid hints"):
        bank_from_records([{"id": "a", "name": "A", "hints": []}])


def test_blank_hints_are_not_usable() -> None:
    with pytest.raises(ContentError, match="no valid hints"):
        bank_from_records([{"id": "a", "name": "A", "hints": ["  ", ""]}])


def test_missing_id_or_name_raises() -> None:
    with pytest.raises(ContentError, match="missing an id"):
        bank_from_records([{"name": "A", "hints": ["x"]}])
    with pytest.raises(ContentError, match="missing a name"):
        bank_from_records([{"id": "a", "hints": ["x"]}])


def test_empty_bank_raises() -> None:
    with pytest.raises(ContentError, match="no eras"):
        bank_from_records([])


def test_content_error_is_value_error() -> None:
    assert issubclass(ContentError, ValueError)


def test_invalid_json_raises_content_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ContentError, match="not valid JSON"):
        load_bank_from_file(path)


def test_payload_shape_is_checked(tmp_path: Path) -> None:
    wrong_root = tmp_path / "root.json"
    wrong_root.write_text(json.dumps({"epochs": []}), encoding="utf-8")
    with pytest.raises(ContentError, match="must hold a list"):
        load_bank_from_file(wrong_root)

    wrong_item = tmp_path / "item.json"
    wrong_item.write_text(json.dumps(["antiken"]), encoding="utf-8")
    with pytest.raises(ContentError, match="non-object"):
        load_bank_from_file(wrong_item)
