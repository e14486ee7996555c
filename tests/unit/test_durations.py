"""
Unit tests -- duration literal parsing and canonical ordering.
"""
import pytest

from promquery.query.durations import (
    Duration,
    DurationUnit,
    canonical_duration,
    compose_duration,
    parse_duration,
)
from promquery.query.errors import BuilderError, InvalidTimeDuration


# ── Single units ─────────────────────────────────────────

@pytest.mark.parametrize(
    "literal, unit, magnitude",
    [
        ("500ms", DurationUnit.MILLISECONDS, 500),
        ("30s", DurationUnit.SECONDS, 30),
        ("5m", DurationUnit.MINUTES, 5),
        ("2h", DurationUnit.HOURS, 2),
        ("2d", DurationUnit.DAYS, 2),
        ("1w", DurationUnit.WEEKS, 1),
        ("1y", DurationUnit.YEARS, 1),
    ],
)
def test_single_unit(literal, unit, magnitude):
    assert parse_duration(literal) == [Duration(unit, magnitude)]


def test_zero_magnitude_allowed():
    assert canonical_duration("0s") == "0s"


def test_empty_literal_is_empty():
    assert parse_duration("") == []
    assert canonical_duration("") == ""


# ── Composite literals ───────────────────────────────────

def test_ms_not_split_as_minutes():
    units = parse_duration("30s500ms")
    assert units == [
        Duration(DurationUnit.MILLISECONDS, 500),
        Duration(DurationUnit.SECONDS, 30),
    ]


def test_canonical_order_is_by_unit_rank():
    assert canonical_duration("1m30s500ms") == "500ms30s1m"


def test_input_order_does_not_matter():
    assert canonical_duration("2d1m") == canonical_duration("1m2d") == "1m2d"


def test_rank_not_elapsed_time():
    # 90s is longer than 1m but seconds still sort first
    assert canonical_duration("1m90s") == "90s1m"


def test_repeated_unit_kept():
    assert canonical_duration("2s1s") == "1s2s"


def test_compose_sorts_unsorted_input():
    units = [Duration(DurationUnit.YEARS, 1), Duration(DurationUnit.MILLISECONDS, 5)]
    assert compose_duration(units) == "5ms1y"


# ── Ordering ─────────────────────────────────────────────

def test_unit_rank_order():
    assert list(DurationUnit) == sorted(DurationUnit)
    assert [u.suffix for u in DurationUnit] == ["ms", "s", "m", "h", "d", "w", "y"]


def test_duration_compares_unit_first():
    assert Duration(DurationUnit.MILLISECONDS, 10_000) < Duration(DurationUnit.SECONDS, 1)


# ── Failures ─────────────────────────────────────────────

@pytest.mark.parametrize(
    "literal",
    ["10x", "5", "s", "ms", "1.5s", "-1s", "5mm", "1m30", " 5s", "1m 30s", "5S", "+5s"],
)
def test_invalid_literal_raises(literal):
    with pytest.raises(InvalidTimeDuration):
        parse_duration(literal)


def test_invalid_duration_is_builder_error():
    with pytest.raises(BuilderError):
        canonical_duration("10x")


def test_negative_magnitude_rejected():
    with pytest.raises(InvalidTimeDuration):
        Duration(DurationUnit.SECONDS, -1)


def test_unknown_suffix_lookup():
    with pytest.raises(InvalidTimeDuration, match="Unknown duration unit"):
        DurationUnit.from_suffix("x")
