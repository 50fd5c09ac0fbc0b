"""Query state models for a word check session."""

from dataclasses import dataclass
from enum import Enum

from domain.model.definition import LookupFailure


class QueryState(str, Enum):
    """Lifecycle of a single query.

    IDLE -> CHECKING -> GOOD | BAD
    GOOD -> FETCHING_DEFINITION -> DEFINITION_SHOWN | DEFINITION_FAILED
    """

    IDLE = "idle"
    CHECKING = "checking"
    GOOD = "good"
    BAD = "bad"
    FETCHING_DEFINITION = "fetching_definition"
    DEFINITION_SHOWN = "definition_shown"
    DEFINITION_FAILED = "definition_failed"

    @property
    def is_good(self) -> bool:
        return self in _GOOD_STATES


_GOOD_STATES = frozenset({
    QueryState.GOOD,
    QueryState.FETCHING_DEFINITION,
    QueryState.DEFINITION_SHOWN,
    QueryState.DEFINITION_FAILED,
})


@dataclass(frozen=True)
class QuerySnapshot:
    """What a front end renders for the latest query."""
    word: str = ""
    state: QueryState = QueryState.IDLE
    definition_text: str = ""
    failure: LookupFailure | None = None

    @property
    def verdict(self) -> str | None:
        """Return "GOOD" or "BAD" once the check has finished, else None."""
        if self.state.is_good:
            return "GOOD"
        if self.state is QueryState.BAD:
            return "BAD"
        return None
