"""
Shared fixtures for the advocate directory tests.

Provides a small in-memory directory (three advocates, exactly one in
Boston) and helpers for building records and canned HTTP responses.
"""
import json
import sys
from pathlib import Path

import pytest
import requests

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from directory.config import DirectoryConfig
from directory.models import Advocate


def make_advocate(id=1, first_name="Ann", last_name="Lee", city="Denver",
                  degree="MD", specialties=("Pediatrics",), years=5,
                  phone="5551234567"):
    return Advocate(
        id=id,
        first_name=first_name,
        last_name=last_name,
        city=city,
        degree=degree,
        specialties=tuple(specialties),
        years_of_experience=years,
        phone_number=phone,
    )


def make_response(status_code=200, body=None, text=None):
    """Build a real requests.Response so raise_for_status behaves normally."""
    r = requests.Response()
    r.status_code = status_code
    r.url = "http://directory.test/api/advocates"
    r.reason = "OK" if status_code < 400 else "Error"
    if text is None:
        text = json.dumps(body if body is not None else {"data": []})
    r._content = text.encode("utf-8")
    r.encoding = "utf-8"
    return r


@pytest.fixture
def advocates():
    return (
        make_advocate(1, "John", "Doe", "New York", "MD",
                      ("Cardiology", "Bipolar"), 10, "5551234567"),
        make_advocate(2, "Jane", "Smith", "Boston", "PhD",
                      ("LGBTQ", "Trauma & PTSD"), 8, "5559876543"),
        make_advocate(3, "Alice", "Johnson", "Chicago", "MSW",
                      ("Pediatrics", "Sleep issues"), 3, "5554567890"),
    )


@pytest.fixture
def fast_config():
    return DirectoryConfig(debounce_ms=20)
