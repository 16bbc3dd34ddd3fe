"""Plate number validation, normalization and the 7-slot input model.

National format: ``K`` + two letters, an optional space, three digits and one
or two trailing letters (``KDA 456B``, ``KCE 123AB``).
"""

from __future__ import annotations

import re
import string

PLATE_RE = re.compile(r"K[A-Z]{2}\s?[0-9]{3}[A-Z]{1,2}", re.ASCII)
_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")

LETTER = "letter"
DIGIT = "digit"

# Classes of the seven input slots; a second trailing letter is typed free-form
SLOT_CLASSES: tuple[str, ...] = (LETTER, LETTER, LETTER, DIGIT, DIGIT, DIGIT, LETTER)

PREFIX_LEN = 3
MAX_PLATE_CHARS = 8


def _char_fits(ch: str, cls: str) -> bool:
    if cls == LETTER:
        return ch in string.ascii_uppercase
    return ch in string.digits


def _position_class(pos: int) -> str:
    return DIGIT if PREFIX_LEN <= pos < PREFIX_LEN + 3 else LETTER


def is_valid_plate_number(plate: str) -> bool:
    """True iff the trimmed input is a complete national plate."""
    return PLATE_RE.fullmatch(plate.strip()) is not None


def is_partially_valid_plate(plate: str) -> bool:
    """True iff the trimmed input can still be extended to a valid plate.

    Walks the characters once: every reached position must hold its class
    (``K``, letter, letter, digit x3, letter x1-2) and a single space is
    only allowed directly after the three-letter prefix.
    """
    text = plate.strip()
    if not text:
        return False

    pos = 0
    seen_space = False
    for ch in text:
        if ch.isspace():
            if pos != PREFIX_LEN or seen_space:
                return False
            seen_space = True
            continue
        if pos >= MAX_PLATE_CHARS:
            return False
        if pos == 0:
            if ch != "K":
                return False
        elif not _char_fits(ch, _position_class(pos)):
            return False
        pos += 1
    return True


def format_plate_number(raw: str) -> str:
    """Loose display formatting: ``kda456b`` → ``KDA 456B``."""
    cleaned = _NON_ALNUM_RE.sub("", raw).upper()
    if len(cleaned) <= PREFIX_LEN:
        return cleaned
    return f"{cleaned[:PREFIX_LEN]} {cleaned[PREFIX_LEN:PREFIX_LEN + 4]}"


def normalize_plate(plate: str) -> str:
    """Canonical storage form.

    Uppercases and collapses whitespace. National plates always get the
    single space after the prefix; anything else (motorcycles, foreign
    vehicles) is only uppercased.
    """
    text = " ".join(plate.split()).upper()
    if is_valid_plate_number(text):
        compact = text.replace(" ", "")
        return f"{compact[:PREFIX_LEN]} {compact[PREFIX_LEN:]}"
    return text


class PlateSlots:
    """Seven independently addressable characters of a plate being typed."""

    __slots__ = ("_chars",)

    def __init__(self) -> None:
        self._chars: list[str] = [""] * len(SLOT_CLASSES)

    @classmethod
    def from_paste(cls, text: str) -> PlateSlots:
        """Greedy left-to-right fill, skipping characters of the wrong class."""
        slots = cls()
        raw = _NON_ALNUM_RE.sub("", text).upper()
        i = 0
        for ch in raw:
            if i >= len(SLOT_CLASSES):
                break
            if _char_fits(ch, SLOT_CLASSES[i]):
                slots._chars[i] = ch
                i += 1
        return slots

    @classmethod
    def from_plate(cls, plate: str) -> PlateSlots:
        """Load a known plate (e.g. a picked autocomplete suggestion)."""
        slots = cls()
        raw = "".join(plate.split()).upper()
        for i, ch in enumerate(raw[: len(SLOT_CLASSES)]):
            slots._chars[i] = ch
        return slots

    @property
    def chars(self) -> list[str]:
        return list(self._chars)

    def set(self, index: int, value: str) -> bool:
        """Store the last typed character if it fits the slot's class.

        An empty value clears the slot. Returns False when the character
        was rejected; the slot is left untouched in that case.
        """
        if not 0 <= index < len(SLOT_CLASSES):
            raise IndexError(f"plate slot {index} out of range")
        if not value:
            self._chars[index] = ""
            return True
        ch = value[-1].upper()
        if not _char_fits(ch, SLOT_CLASSES[index]):
            return False
        self._chars[index] = ch
        return True

    def clear(self, index: int) -> None:
        self.set(index, "")

    def first_empty(self) -> int | None:
        for i, ch in enumerate(self._chars):
            if not ch:
                return i
        return None

    def compose(self) -> str:
        prefix = "".join(self._chars[:PREFIX_LEN])
        digits = "".join(self._chars[PREFIX_LEN:6])
        suffix = self._chars[6]
        if not (prefix or digits or suffix):
            return ""
        if not digits and not suffix:
            return prefix
        return f"{prefix} {digits}{suffix}"

    @property
    def is_valid(self) -> bool:
        return is_valid_plate_number(self.compose())

    @property
    def is_partial(self) -> bool:
        return is_partially_valid_plate(self.compose())
