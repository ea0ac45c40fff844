"""CLI entrypoint for the literary era matching exercise."""

from __future__ import annotations

import argparse
import logging
import re
from collections.abc import Callable
from pathlib import Path

from .content_loader import ContentError, load_bank, load_bank_from_file
from .models import MatchResult
from .service import ExerciseView, MatchExercise

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
QUIT_COMMANDS = {":quit", ":exit", ":q"}
NEW_ROUND_COMMANDS = {":new", ":n"}
HELP_COMMANDS = {":help", ":h"}
ANSWER_KEY_COMMANDS = {":key", ":facit"}
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
SELECTION_PATTERN = re.compile(r"^(?P<era>\d+)?\s*(?P<slot>[a-z])?$")
MAX_CLUES = 26

HELP_LINES = (
    "Pick an era by its number, then a clue by its letter (or both at once, e.g. 2c).",
    "A correct pair is checked off. A wrong pair is flagged with '!' for a moment.",
    "Aim for all pairs in as few attempts and as little time as possible.",
    "Tip: read through the era list before you start.",
)


def _exercise(bank_path: Path | None = None, seed: int | None = None) -> MatchExercise:
    """Create exercise from the bundled bank or an alternate bank file."""
    bank = load_bank_from_file(bank_path) if bank_path is not None else load_bank()
    if len(bank) > MAX_CLUES:
        raise ContentError(f"Content bank has {len(bank)} eras; the shell can letter at most {MAX_CLUES} clues.")
    return MatchExercise(bank=bank, seed=seed)


def run(argv: list[str] | None = None) -> int:
    """Run the CLI application."""
    parser = argparse.ArgumentParser(prog="epokmatch", description="Match literary eras with their characteristics")
    parser.add_argument("command", nargs="?", default="play", choices=["play"])
    parser.add_argument("--bank", type=Path, default=None, help="alternate content bank JSON file")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible rounds")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS)
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        exercise = _exercise(args.bank, args.seed)
    except (ContentError, OSError) as exc:
        print(f"Could not load content bank: {exc}")
        return 2
    return play_shell(exercise)


def play_shell(exercise: MatchExercise | None = None, input_fn: InputFn = input, print_fn: PrintFn = print) -> int:
    """Run the interactive matching loop until the learner quits."""
    if exercise is None:
        exercise = _exercise()
    print_fn("\n=== Match Literary Eras ===")
    print_fn("Connect each era with the right characteristic. Type :help for instructions.")
    while True:
        _render(exercise.view(), print_fn)
        choice = input_fn("Choose: ").strip().lower()
        if choice in QUIT_COMMANDS:
            return 0
        if choice in NEW_ROUND_COMMANDS:
            exercise.advance_round()
        elif choice in HELP_COMMANDS:
            exercise.toggle_help()
        elif choice in ANSWER_KEY_COMMANDS:
            _answer_key_flow(exercise, print_fn)
        else:
            _selection_flow(exercise, choice, print_fn)


def _selection_flow(exercise: MatchExercise, choice: str, print_fn: PrintFn) -> None:
    """Apply an era number and/or clue letter typed by the learner."""
    match = SELECTION_PATTERN.match(choice)
    if not choice or match is None:
        print_fn("Invalid choice.")
        return

    view = exercise.view()
    era_text = match.group("era")
    slot_text = match.group("slot")
    if era_text is not None and not 1 <= int(era_text) <= len(view.eras):
        print_fn("Invalid choice.")
        return
    if slot_text is not None:
        position = ord(slot_text) - ord("a")
        if position >= len(view.hints):
            print_fn("Invalid choice.")
            return
        if view.hints[position].matched:
            print_fn("That clue is already matched.")
            return

    result: MatchResult | None = None
    if era_text is not None and slot_text is not None:
        # A typed pair replaces any earlier picks.
        exercise.clear_selection()
    if era_text is not None:
        result = exercise.select_era_at(int(era_text) - 1)
    if slot_text is not None:
        result = exercise.select_slot_at(ord(slot_text) - ord("a"))
    if result is None:
        return
    if result.correct:
        print_fn(f"Correct: {exercise.era_name(result.era_id)}.")
    else:
        print_fn("Not quite. Try again.")


def _answer_key_flow(exercise: MatchExercise, print_fn: PrintFn) -> None:
    """Print every era with all of its characteristics."""
    print_fn("\n=== Answer Key ===")
    for era in exercise.answer_key():
        print_fn(era.name)
        for hint in era.hints:
            print_fn(f"- {hint}")


def _render(view: ExerciseView, print_fn: PrintFn) -> None:
    """Print stats, both columns, and the help and completion panels."""
    print_fn(
        f"\nAttempts: {view.attempts}  Correct: {view.correct}  "
        f"Time: {view.elapsed_seconds}s  Round: {view.round}"
    )
    if view.help_visible:
        print_fn("")
        for line in HELP_LINES:
            print_fn(f"* {line}")

    print_fn("\nEras")
    for idx, era in enumerate(view.eras, start=1):
        marker = ">" if era.selected else " "
        print_fn(f"{marker}{idx:>2}) {era.name}")

    print_fn("\nCharacteristics")
    for idx, hint in enumerate(view.hints):
        if hint.matched:
            status = "x"
        elif hint.failed:
            status = "!"
        else:
            status = " "
        marker = ">" if hint.selected else " "
        print_fn(f"{marker}{chr(ord('a') + idx)}) [{status}] {hint.hint}")

    if view.complete:
        print_fn("\nWell matched!")
        print_fn(
            f"{view.correct} / {len(view.hints)} correct • {view.attempts} attempts • {view.elapsed_seconds} seconds"
        )
        print_fn("Type :new to play again.")


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
