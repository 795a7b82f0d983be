"""
Advisory emission for non-fatal corrections.

Warnings are not always surfaced to the caller, so the default sink repeats
every advisory as a log record with identical text. Callers that want the
advisories as data pass their own sink instead.
"""
from __future__ import annotations

import logging
import sys
import warnings
from typing import Callable

from flight_planning import config
from flight_planning.exceptions import FlightParameterWarning
from flight_planning.types import Advisory, AdvisoryKind

logger = logging.getLogger(__name__)

AdvisorySink = Callable[[Advisory], None]


def _caller_stacklevel() -> int:
    """Stack level of the first frame outside this package, relative to our caller."""
    level = 2
    frame = sys._getframe(2)
    while frame is not None and frame.f_globals.get("__name__", "").startswith("flight_planning"):
        frame = frame.f_back
        level += 1
    return level


def default_sink(advisory: Advisory) -> None:
    logger.warning("%s", advisory.message)
    if config.settings.advisory_warnings:
        warnings.warn(advisory.message, FlightParameterWarning, stacklevel=_caller_stacklevel())


def emit(kind: AdvisoryKind, message: str, sink: AdvisorySink | None = None) -> Advisory:
    advisory = Advisory(kind=kind, message=message)
    # An empty AdvisoryCollector is falsy, so test for None explicitly.
    (default_sink if sink is None else sink)(advisory)
    return advisory


class AdvisoryCollector:
    """Sink that keeps advisories in memory, optionally forwarding them on."""

    def __init__(self, forward: AdvisorySink | None = None):
        self.advisories: list[Advisory] = []
        self._forward = forward

    def __call__(self, advisory: Advisory) -> None:
        self.advisories.append(advisory)
        if self._forward is not None:
            self._forward(advisory)

    @property
    def kinds(self) -> list[AdvisoryKind]:
        return [a.kind for a in self.advisories]

    def __len__(self) -> int:
        return len(self.advisories)
