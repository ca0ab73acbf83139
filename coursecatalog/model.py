"""
Central data model definitions used across the project.

This module defines the canonical Course and Level types so that:
- the parser, the catalog and the CLI share the same field names
- level tokens from data files map to exactly one Level member
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


DATE_FORMAT = "%d/%m/%Y"


class Level(Enum):
    """
    Difficulty tier of a course.

    The value of each member is its canonical token as written in data files.
    """

    BEGINNER = "principiante"
    INTERMEDIATE = "intermedio"
    ADVANCED = "avanzado"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str) -> "Level":
        """
        Parse a level token (case-insensitive, surrounding whitespace ignored).

        Raises ValueError for tokens not listed in LEVEL_TOKENS.
        """
        key = token.strip().lower()
        try:
            return LEVEL_TOKENS[key]
        except KeyError:
            raise ValueError(f"Unknown level: {token!r}") from None


# External token -> Level. Keys are lowercase.
LEVEL_TOKENS: dict[str, Level] = {
    "principiante": Level.BEGINNER,
    "intermedio": Level.INTERMEDIATE,
    "avanzado": Level.ADVANCED,
    "beginner": Level.BEGINNER,
    "intermediate": Level.INTERMEDIATE,
    "advanced": Level.ADVANCED,
}


@dataclass(frozen=True)
class Course:
    """
    Represents one course as stored in a category of the catalog.
    """

    name: str
    publication_date: date
    level: Level

    def __str__(self) -> str:
        return f"{self.name} | {self.publication_date.strftime(DATE_FORMAT)} | {self.level}"
