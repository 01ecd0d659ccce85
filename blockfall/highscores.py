"""The high score table: reading, writing, ranking and display lines."""

from __future__ import annotations

import bisect
import os
from dataclasses import dataclass

HIGHSCORES_NUM_DISPLAY = 16  # 15 rows plus the title row
DEFAULT_PATH = "highscores.csv"

HEADER = "Name              Level      Lines    Score"

_COLUMN_SIZE_NAME = 20
_COLUMN_SIZE_LEVEL = 10
_COLUMN_SIZE_LINES = 7
_COLUMN_SIZE_SCORE = 6


@dataclass(frozen=True)
class HighScoreEntry:
    """One row of the table."""

    score: int
    name: str
    level: int
    lines: int


def _format_row(entry: HighScoreEntry, name_fill: str) -> str:
    return (
        entry.name.ljust(_COLUMN_SIZE_NAME, name_fill)
        + str(entry.level).ljust(_COLUMN_SIZE_LEVEL, ".")
        + str(entry.lines).ljust(_COLUMN_SIZE_LINES, ".")
        + str(entry.score).rjust(_COLUMN_SIZE_SCORE, ".")
    )


class HighScores:
    """High scores kept in score order, stored as CSV at ``path``.

    Among equal scores the most recently added ranks highest. The file holds
    ``score,name,lines,level`` lines from the lowest score to the highest.
    """

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
        self.path = path
        self.clean = True
        self._entries: list[HighScoreEntry] = []  # ascending by score

    def entries(self) -> tuple[HighScoreEntry, ...]:
        """Return the entries best first."""
        return tuple(reversed(self._entries))

    def push(self, score: int, name: str, level: int, lines: int) -> None:
        """Add an entry, ranking it above any existing equal score."""
        entry = HighScoreEntry(score, name, level, lines)
        bisect.insort_right(self._entries, entry, key=lambda e: e.score)

    def read(self) -> int:
        """Replace the entries with those in the file; return how many were read.

        A missing file leaves the table empty. Raises ValueError on a line
        that does not hold four fields with numeric score, lines and level.
        """
        self._entries.clear()
        try:
            with open(self.path, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except FileNotFoundError:
            return 0
        for number, line in enumerate(lines, start=1):
            fields = line.split(",")
            if len(fields) < 4:
                raise ValueError(f"{self.path}:{number}: expected 4 fields, got {line!r}")
            score, name, line_count, level = fields[:4]
            self.push(int(score), name, int(level), int(line_count))
        return len(self._entries)

    def write(self) -> None:
        """Save the entries; commas in names become periods."""
        with open(self.path, "w", encoding="utf-8") as handle:
            for entry in self._entries:
                name = entry.name.replace(",", ".")
                handle.write(f"{entry.score},{name},{entry.lines},{entry.level}\n")

    def is_new_high(self, score: int) -> int:
        """Return the 1-based display position ``score`` would take, or 0 if off the table."""
        position = 0
        for entry in reversed(self._entries):
            position += 1
            if entry.score <= score:
                break
        if position == len(self._entries) and position <= HIGHSCORES_NUM_DISPLAY:
            position += 1
        return position if position <= HIGHSCORES_NUM_DISPLAY - 1 else 0

    def set_high_score(self, score: int, name: str, level: int, lines: int) -> None:
        """Add an entry, save the table and mark it as needing a reload."""
        self.push(score, name, level, lines)
        self.write()
        self.clean = False

    def score_lines(
        self, placeholder: HighScoreEntry | None = None, placeholder_row: int = 0
    ) -> list[str]:
        """Return the title and up to 15 formatted rows, best first.

        When ``placeholder_row`` is positive, ``placeholder`` is shown at that
        row with its name padded by spaces, or after the stored rows if they
        run out first.
        """
        result = [HEADER]
        stored = iter(reversed(self._entries))
        remaining = len(self._entries)
        placeholder_added = False
        counter = 1
        while remaining > 0 and counter < HIGHSCORES_NUM_DISPLAY:
            if placeholder_row == counter and placeholder is not None:
                result.append(_format_row(placeholder, " "))
                placeholder_added = True
            else:
                result.append(_format_row(next(stored), "."))
                remaining -= 1
            counter += 1
        if not placeholder_added and placeholder_row > 0 and placeholder is not None:
            result.append(_format_row(placeholder, " "))
        return result