"""Compact body notation such as ``"6W3M"`` or ``"5T2MC"``.

Digits multiply the group of letters that follows them; a group without a
leading number is used once.

| Letter | Part |
| ------ | ---- |
| M | move |
| W | work |
| C | carry |
| A | attack |
| R | ranged_attack |
| T | tough |
| H | heal |
| L | claim |
"""

from __future__ import annotations

from typing import List, Tuple

from ..config.constants import MAX_CREEP_SIZE
from ..parts import PartCategory
from .body import Body
from .errors import NotationError, TooManyParts

__all__ = ["PART_LETTERS", "parse_part_groups", "parse_parts", "parse_body", "format_body"]

PART_LETTERS = {
    "M": PartCategory.MOVE,
    "W": PartCategory.WORK,
    "C": PartCategory.CARRY,
    "A": PartCategory.ATTACK,
    "R": PartCategory.RANGED_ATTACK,
    "T": PartCategory.TOUGH,
    "H": PartCategory.HEAL,
    "L": PartCategory.CLAIM,
}
_LETTER_FOR = {category: letter for letter, category in PART_LETTERS.items()}


def parse_part_groups(text: str) -> List[Tuple[str, str]]:
    """Split ``text`` into ``(multiplier, letters)`` groups.

    ``"5T2MC"`` yields ``[("5", "T"), ("2", "MC")]``.
    """

    groups: List[Tuple[str, str]] = []
    digits: List[str] = []
    letters: List[str] = []
    for character in text:
        if character.isspace():
            continue
        if character.isdigit():
            if letters:
                groups.append(("".join(digits), "".join(letters)))
                digits, letters = [], []
            digits.append(character)
        else:
            letters.append(character)
    if letters:
        groups.append(("".join(digits), "".join(letters)))
    elif digits:
        raise NotationError(f"Body string {text!r} ends with a multiplier and no parts")
    return groups


def parse_parts(text: str) -> List[PartCategory]:
    parts: List[PartCategory] = []
    for multiplier_text, letters in parse_part_groups(text):
        multiplier = int(multiplier_text) if multiplier_text else 1
        if multiplier <= 0:
            raise NotationError(f"Invalid multiplier {multiplier_text!r} in body string {text!r}")
        try:
            group = [PART_LETTERS[letter.upper()] for letter in letters]
        except KeyError as exc:
            raise NotationError(f"Unknown part letter {exc.args[0]!r} in body string {text!r}") from exc
        if len(parts) + multiplier * len(group) > MAX_CREEP_SIZE:
            raise TooManyParts(f"Body string {text!r} expands to more than {MAX_CREEP_SIZE} parts")
        parts.extend(group * multiplier)
    return parts


def parse_body(text: str) -> Body:
    return Body(parse_parts(text))


def format_body(body: Body) -> str:
    """Render ``body`` as run-length notation, e.g. ``"2W1C2M"``."""

    chunks: List[str] = []
    run_letter = ""
    run_length = 0
    for category in body.categories():
        letter = _LETTER_FOR[category]
        if letter == run_letter:
            run_length += 1
            continue
        if run_length:
            chunks.append(f"{run_length}{run_letter}")
        run_letter, run_length = letter, 1
    if run_length:
        chunks.append(f"{run_length}{run_letter}")
    return "".join(chunks)
