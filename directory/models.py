# models.py - the advocate record and its JSON shape
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class Advocate:
    id: Any
    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: Tuple[str, ...]
    years_of_experience: int
    phone_number: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_json(cls, raw: Dict[str, Any]) -> "Advocate":
        """Build a record from one item of the listing response.

        Phone numbers may come through as JSON numbers; they are kept as text.
        """
        return cls(
            id=raw.get("id"),
            first_name=str(raw.get("firstName") or ""),
            last_name=str(raw.get("lastName") or ""),
            city=str(raw.get("city") or ""),
            degree=str(raw.get("degree") or ""),
            specialties=tuple(str(s) for s in raw.get("specialties") or ()),
            years_of_experience=int(raw.get("yearsOfExperience") or 0),
            phone_number=str(raw.get("phoneNumber") or ""),
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "city": self.city,
            "degree": self.degree,
            "specialties": list(self.specialties),
            "yearsOfExperience": self.years_of_experience,
            "phoneNumber": self.phone_number,
        }


def parse_advocates(items: List[Dict[str, Any]]) -> Tuple[Advocate, ...]:
    return tuple(Advocate.from_json(item) for item in items)
