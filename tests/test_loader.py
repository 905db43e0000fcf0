"""
Tests for directory/loader.py with the HTTP session mocked out.
"""
from unittest.mock import MagicMock

import pytest
import requests

from directory.errors import LoadError
from directory.loader import SESSION, TIMEOUT, fetch_advocates
from conftest import make_response

URL = "http://directory.test/api/advocates"

ITEM = {
    "id": 1, "firstName": "John", "lastName": "Doe", "city": "Boston",
    "degree": "MD", "specialties": ["Cardiology"], "yearsOfExperience": 10,
    "phoneNumber": "5551234567",
}


def _http(response=None, error=None):
    http = MagicMock()
    if error is not None:
        http.get.side_effect = error
    else:
        http.get.return_value = response
    return http


def test_fetch_returns_records_in_order():
    items = [dict(ITEM, id=2), dict(ITEM, id=1)]
    http = _http(make_response(200, {"data": items}))
    result = fetch_advocates(URL, session=http)
    assert [a.id for a in result] == [2, 1]
    http.get.assert_called_once_with(URL, timeout=TIMEOUT)


def test_fetch_passes_timeout():
    http = _http(make_response(200, {"data": []}))
    fetch_advocates(URL, timeout=1.5, session=http)
    http.get.assert_called_once_with(URL, timeout=1.5)


def test_empty_listing_is_fine():
    assert fetch_advocates(URL, session=_http(make_response(200, {"data": []}))) == ()


@pytest.mark.parametrize("status", [404, 500, 503])
def test_non_2xx_raises(status):
    with pytest.raises(LoadError) as info:
        fetch_advocates(URL, session=_http(make_response(status, text="err")))
    assert str(status) in str(info.value)
    assert isinstance(info.value.__cause__, requests.HTTPError)


def test_transport_error_raises():
    http = _http(error=requests.ConnectionError("refused"))
    with pytest.raises(LoadError):
        fetch_advocates(URL, session=http)


def test_invalid_json_raises():
    with pytest.raises(LoadError):
        fetch_advocates(URL, session=_http(make_response(200, text="<html>")))


@pytest.mark.parametrize("body", [[], {"items": []}, {"data": "nope"}])
def test_wrong_shape_raises(body):
    with pytest.raises(LoadError):
        fetch_advocates(URL, session=_http(make_response(200, body)))


def test_malformed_record_raises():
    bad = dict(ITEM, yearsOfExperience="lots")
    with pytest.raises(LoadError):
        fetch_advocates(URL, session=_http(make_response(200, {"data": [bad]})))


def test_module_session_identifies_client():
    assert SESSION.headers["User-Agent"].startswith("advocate-directory/")
