"""Prometheus metrics for the atomz rule cycle.

Counters and histograms live here so the dispatcher can record lightweight
telemetry without owning metric instances. Labels stay low-cardinality:
the rule class name and a fixed outcome vocabulary.
"""

from __future__ import annotations

from typing import Final

from prometheus_client import Counter, Histogram


ACTIONS_TOTAL: Final[Counter] = Counter(
    "atomz_actions_total",
    (
        "Total number of actions seen by the dispatcher, labeled by the "
        "handling rule and outcome (applied, invalid, unhandled)."
    ),
    labelnames=("rule", "outcome"),
)

REACTIONS_TOTAL: Final[Counter] = Counter(
    "atomz_reactions_total",
    "Total number of reaction actions emitted by executed rules.",
)

REACTION_CHAIN_LENGTH: Final[Histogram] = Histogram(
    "atomz_reaction_chain_length",
    "Number of actions executed for one dispatched root action.",
    buckets=(1, 2, 5, 10, 25, 50, 100, 250, 1000),
)


def record_action(rule: str, outcome: str) -> None:
    ACTIONS_TOTAL.labels(rule=rule, outcome=outcome).inc()


def record_reactions(count: int) -> None:
    if count:
        REACTIONS_TOTAL.inc(count)


def observe_chain_length(length: int) -> None:
    REACTION_CHAIN_LENGTH.observe(length)
