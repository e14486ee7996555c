"""
InstantQueryBuilder -- fluent construction of instant vector-selector queries.

Each step validates its own input and raises a ``BuilderError`` subclass on
failure; ``build()`` performs the one cross-field check (a selector needs a
metric name or at least one label matcher) and returns an immutable
``InstantQuery``.

Example::

    query = (
        InstantQuery.builder()
        .metric("up")
        .with_label("job", "node")
        .at("1618922012")
        .timeout("30s")
        .build()
    )
    query.query    # 'up{job="node"}'
"""
from __future__ import annotations

from promquery.query.durations import Duration, compose_duration, parse_duration
from promquery.query.errors import IllegalVectorSelector, InvalidMetricName
from promquery.query.labels import LabelMatcherSet, MatchOp
from promquery.query.models import InstantQuery
from promquery.query.time_spec import canonical_time
from promquery.core.logging import get_logger

logger = get_logger(__name__)

# Keywords the query language reserves; they cannot appear as a bare metric
# name (use {__name__="on"} instead).
RESERVED_METRIC_NAMES = frozenset({"bool", "on", "ignoring", "group_left", "group_right"})


def validate_metric_name(metric: str) -> str:
    """Return *metric* unchanged, or raise InvalidMetricName if reserved."""
    if metric in RESERVED_METRIC_NAMES:
        raise InvalidMetricName(
            f"'{metric}' is a reserved keyword and cannot be used as a metric name."
        )
    return metric


def render_selector(metric: str | None, labels: LabelMatcherSet | None) -> str:
    """Render a vector selector from a metric name and/or label matchers."""
    matchers = labels.render() if labels else None
    if metric is not None:
        return f"{metric}{{{matchers}}}" if matchers is not None else metric
    if matchers is not None:
        return f"{{{matchers}}}"
    raise IllegalVectorSelector(
        "A vector selector must specify a metric name or at least one label matcher."
    )


class InstantQueryBuilder:
    """Accumulates selector parts, evaluation time and timeout."""

    def __init__(self) -> None:
        self._metric: str | None = None
        self._labels: LabelMatcherSet | None = None
        self._time: str | None = None
        self._timeout: list[Duration] | None = None

    # ── Selector ─────────────────────────────────────────

    def metric(self, metric: str) -> InstantQueryBuilder:
        """Set the metric name.

        Raises InvalidMetricName for ``bool``, ``on``, ``ignoring``,
        ``group_left`` and ``group_right``.  No other check is made.
        """
        try:
            self._metric = validate_metric_name(metric)
        except InvalidMetricName:
            logger.warning("Rejected reserved metric name %r", metric)
            raise
        return self

    def _add_label(self, label: str, op: MatchOp, value: str) -> InstantQueryBuilder:
        if self._labels is None:
            self._labels = LabelMatcherSet()
        self._labels.add(label, op, value)
        return self

    def with_label(self, label: str, value: str) -> InstantQueryBuilder:
        """Select series whose *label* equals *value* (``label="value"``)."""
        return self._add_label(label, MatchOp.EQUAL, value)

    def without_label(self, label: str, value: str) -> InstantQueryBuilder:
        """Select series whose *label* differs from *value* (``label!="value"``)."""
        return self._add_label(label, MatchOp.NOT_EQUAL, value)

    def match_label(self, label: str, value: str) -> InstantQueryBuilder:
        """Select series whose *label* regex-matches *value* (``label=~"value"``)."""
        return self._add_label(label, MatchOp.REGEX_MATCH, value)

    def no_match_label(self, label: str, value: str) -> InstantQueryBuilder:
        """Select series whose *label* does not regex-match *value* (``label!~"value"``)."""
        return self._add_label(label, MatchOp.REGEX_NOT_MATCH, value)

    # ── Evaluation parameters ────────────────────────────

    def at(self, time: str) -> InstantQueryBuilder:
        """Evaluate at *time*: a UNIX timestamp or an RFC3339 date-time.

        Raises InvalidTimeSpecifier if *time* is neither.
        """
        self._time = canonical_time(time)
        return self

    def timeout(self, timeout: str) -> InstantQueryBuilder:
        """Set the evaluation timeout from a duration literal such as ``30s500ms``.

        Raises InvalidTimeDuration on a malformed literal; a previously set
        timeout is kept in that case.
        """
        self._timeout = parse_duration(timeout)
        return self

    # ── Terminal ─────────────────────────────────────────

    def build(self) -> InstantQuery:
        """Build the query.  The builder is left unchanged and can be reused.

        Raises IllegalVectorSelector when neither a metric nor a label
        matcher was given.
        """
        query = render_selector(self._metric, self._labels)
        timeout = compose_duration(self._timeout) if self._timeout is not None else None
        built = InstantQuery(query=query, time=self._time, timeout=timeout)
        logger.debug("Built instant query %s", built.params())
        return built

    def __repr__(self) -> str:
        return (
            f"InstantQueryBuilder(metric={self._metric!r}, labels={self._labels!r}, "
            f"time={self._time!r}, timeout={self._timeout!r})"
        )
