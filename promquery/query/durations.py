"""
Duration literals -- parsing and canonical re-serialisation.

A duration literal is a run of ``<integer><unit>`` tokens with no separators,
e.g. ``1m30s500ms`` or ``2d``.  Units are ms, s, m, h, d, w, y.  Parsed units
are sorted by unit rank (ms first, y last) regardless of input order, so the
canonical form of ``1m30s500ms`` is ``500ms30s1m``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from promquery.query.errors import InvalidTimeDuration
from promquery.core.logging import get_logger

logger = get_logger(__name__)


class DurationUnit(IntEnum):
    """Duration units in ascending rank order."""

    MILLISECONDS = 0
    SECONDS = 1
    MINUTES = 2
    HOURS = 3
    DAYS = 4
    WEEKS = 5
    YEARS = 6

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]

    @classmethod
    def from_suffix(cls, suffix: str) -> "DurationUnit":
        try:
            return _UNITS_BY_SUFFIX[suffix]
        except KeyError:
            raise InvalidTimeDuration(f"Unknown duration unit '{suffix}'.") from None


_SUFFIXES: dict[DurationUnit, str] = {
    DurationUnit.MILLISECONDS: "ms",
    DurationUnit.SECONDS: "s",
    DurationUnit.MINUTES: "m",
    DurationUnit.HOURS: "h",
    DurationUnit.DAYS: "d",
    DurationUnit.WEEKS: "w",
    DurationUnit.YEARS: "y",
}

_UNITS_BY_SUFFIX: dict[str, DurationUnit] = {v: k for k, v in _SUFFIXES.items()}


@dataclass(frozen=True, order=True)
class Duration:
    """One ``<magnitude><unit>`` component.  Ordered by unit rank first."""

    unit: DurationUnit
    magnitude: int

    def __post_init__(self) -> None:
        if self.magnitude < 0:
            raise InvalidTimeDuration(f"Duration magnitude must be non-negative, got {self.magnitude}.")

    def __str__(self) -> str:
        return f"{self.magnitude}{self.unit.suffix}"


# ── Tokenizer ────────────────────────────────────────────

# "ms" is tried before the single-letter units so 500ms never splits as 500m + s
_TOKEN_RE = re.compile(r"(?P<num>[^smhdwy]*)(?P<unit>ms|[smhdwy])")
_DIGITS_RE = re.compile(r"[0-9]+")


def _tokenize(text: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise InvalidTimeDuration(
                f"Duration '{text}' has a trailing component without a unit: '{text[pos:]}'."
            )
        tokens.append((m.group("num"), m.group("unit")))
        pos = m.end()
    return tokens


def parse_duration(text: str) -> list[Duration]:
    """Parse a composite duration literal into rank-sorted components.

    Parameters
    ----------
    text : str
        Literal such as ``"1m30s500ms"``.  An empty string yields ``[]``.

    Raises
    ------
    InvalidTimeDuration
        If any component has an unknown unit or a non-integer magnitude.
        Nothing is returned on failure.
    """
    units: list[Duration] = []
    for num, suffix in _tokenize(text):
        if not _DIGITS_RE.fullmatch(num):
            raise InvalidTimeDuration(
                f"Duration '{text}' has an invalid magnitude '{num}' for unit '{suffix}'."
            )
        units.append(Duration(DurationUnit.from_suffix(suffix), int(num)))

    units.sort()
    return units


def compose_duration(units: Iterable[Duration]) -> str:
    """Render components in rank order with no separator."""
    return "".join(str(u) for u in sorted(units))


def canonical_duration(text: str) -> str:
    """Parse *text* and return its canonical rendering."""
    canonical = compose_duration(parse_duration(text))
    logger.debug("Duration %r -> %r", text, canonical)
    return canonical
