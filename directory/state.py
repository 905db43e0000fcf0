# state.py - immutable session state and the transitions between its values
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from directory.filters import filter_advocates
from directory.models import Advocate

LOAD_ERROR_MESSAGE = "Failed to fetch advocates. Please try again later."


class Status(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class SessionState:
    status: Status = Status.LOADING
    advocates: Tuple[Advocate, ...] = ()
    filtered: Tuple[Advocate, ...] = ()
    term: str = ""
    applied_term: str = ""
    error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.status is Status.LOADING

    @property
    def is_empty(self) -> bool:
        """True when the directory is loaded but nothing matches."""
        return self.status is Status.READY and not self.filtered

    @property
    def is_settled(self) -> bool:
        return self.term == self.applied_term


@dataclass(frozen=True)
class Loaded:
    advocates: Tuple[Advocate, ...]


@dataclass(frozen=True)
class Failed:
    message: str = LOAD_ERROR_MESSAGE


@dataclass(frozen=True)
class TermChanged:
    term: str


@dataclass(frozen=True)
class FilterSettled:
    term: str


@dataclass(frozen=True)
class Reset:
    pass


Event = Union[Loaded, Failed, TermChanged, FilterSettled, Reset]


def reduce(state: SessionState, event: Event) -> SessionState:
    """Apply one event and return the next state; ``state`` is never mutated.

    Loading and error are terminal with respect to Loaded/Failed: a session
    that already resolved ignores a second load outcome.
    """
    if isinstance(event, Loaded):
        if state.status is not Status.LOADING:
            return state
        advocates = tuple(event.advocates)
        return replace(
            state,
            status=Status.READY,
            advocates=advocates,
            filtered=filter_advocates(advocates, state.term),
            applied_term=state.term,
            error=None,
        )
    if isinstance(event, Failed):
        if state.status is not Status.LOADING:
            return state
        return replace(
            state,
            status=Status.ERROR,
            advocates=(),
            filtered=(),
            error=event.message,
        )
    if isinstance(event, TermChanged):
        return replace(state, term=event.term)
    if isinstance(event, FilterSettled):
        # a settle for a term the user has since typed past is stale
        if event.term != state.term:
            return state
        return replace(
            state,
            filtered=filter_advocates(state.advocates, event.term),
            applied_term=event.term,
        )
    if isinstance(event, Reset):
        return replace(state, term="", applied_term="", filtered=state.advocates)
    raise TypeError(f"unknown event: {event!r}")
