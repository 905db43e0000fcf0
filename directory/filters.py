# filters.py - case-insensitive multi-field matching over advocate records
from typing import Iterable, List, Tuple

from directory.models import Advocate


def searchable_values(advocate: Advocate) -> List[str]:
    """Every field value a search term is matched against.

    The phone number takes part as stored (raw digits), never in its
    formatted display form.
    """
    values = [
        advocate.first_name,
        advocate.last_name,
        advocate.city,
        advocate.degree,
    ]
    values.extend(advocate.specialties)
    values.append(str(advocate.years_of_experience))
    values.append(advocate.phone_number)
    return values


def matches(advocate: Advocate, term: str) -> bool:
    """True when ``term`` occurs, ignoring case, in any searchable value.

    The raw stored phone number is one of those values, so a term of digits
    such as "555" matches every record whose number contains them, including
    all of the seed listing.
    """
    needle = term.lower()
    if not needle:
        return True
    return any(needle in value.lower() for value in searchable_values(advocate))


def filter_advocates(advocates: Iterable[Advocate], term: str) -> Tuple[Advocate, ...]:
    """Return the advocates matching ``term`` in their original order."""
    if not term:
        return tuple(advocates)
    return tuple(a for a in advocates if matches(a, term))
