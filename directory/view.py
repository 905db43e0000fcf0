# view.py - turns a SessionState into the values the page renders
from dataclasses import dataclass
from typing import List, Optional, Tuple

from directory.models import Advocate
from directory.phone import DEFAULT_REGION, format_phone_number
from directory.state import SessionState, Status

NO_RESULTS_MESSAGE = "No advocates match your search."
LOADING_MESSAGE = "Loading advocates..."


@dataclass(frozen=True)
class Cell:
    """A displayed value; clicking it searches for ``search`` verbatim."""
    text: str
    search: str


@dataclass(frozen=True)
class Row:
    key: str
    first_name: Cell
    last_name: Cell
    city: Cell
    degree: Cell
    specialties: Tuple[Cell, ...]
    years_of_experience: Cell
    phone_number: str


@dataclass(frozen=True)
class PageView:
    status: str
    term: str
    rows: List[Row]
    total: int
    error: Optional[str]
    show_no_results: bool
    loading_message: Optional[str]


def _cell(value) -> Cell:
    text = str(value)
    return Cell(text=text, search=text)


def build_row(advocate: Advocate, region: str = DEFAULT_REGION) -> Row:
    return Row(
        key=str(advocate.id),
        first_name=_cell(advocate.first_name),
        last_name=_cell(advocate.last_name),
        city=_cell(advocate.city),
        degree=_cell(advocate.degree),
        specialties=tuple(_cell(s) for s in advocate.specialties),
        years_of_experience=_cell(advocate.years_of_experience),
        phone_number=format_phone_number(advocate.phone_number, region),
    )


def build_view(state: SessionState, region: str = DEFAULT_REGION) -> PageView:
    # rows only render once the directory is ready
    rows = []
    if state.status is Status.READY:
        rows = [build_row(a, region) for a in state.filtered]
    return PageView(
        status=state.status.value,
        term=state.term,
        rows=rows,
        total=len(state.advocates),
        error=state.error if state.status is Status.ERROR else None,
        show_no_results=state.is_empty,
        loading_message=LOADING_MESSAGE if state.is_loading else None,
    )
