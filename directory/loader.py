# loader.py - reads the advocate listing from the directory endpoint
import logging
from typing import Any, Optional, Tuple

import requests

from directory.errors import LoadError
from directory.models import Advocate, parse_advocates

logger = logging.getLogger(__name__)

SESSION = requests.Session()
SESSION.headers.update({
    "User-Agent": "advocate-directory/1.0",
    "Accept": "application/json",
})
TIMEOUT = 6.0


def _extract_items(body: Any) -> list:
    if not isinstance(body, dict) or not isinstance(body.get("data"), list):
        raise LoadError("listing response is not shaped like {data: [...]}")
    return body["data"]


def fetch_advocates(url: str, timeout: float = TIMEOUT,
                    session: Optional[requests.Session] = None) -> Tuple[Advocate, ...]:
    """GET the listing once and return its records in response order.

    Any transport failure, non-2xx status or unexpected body raises LoadError.
    There is no retry.
    """
    http = session or SESSION
    logger.info("fetching advocates from %s", url)
    try:
        r = http.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.HTTPError as exc:
        raise LoadError(f"HTTP error! status: {exc.response.status_code}") from exc
    except requests.RequestException as exc:
        raise LoadError(f"could not reach {url}: {exc}") from exc
    try:
        body = r.json()
    except ValueError as exc:
        raise LoadError("listing response is not valid JSON") from exc
    try:
        advocates = parse_advocates(_extract_items(body))
    except (TypeError, ValueError, AttributeError) as exc:
        raise LoadError(f"malformed advocate record: {exc}") from exc
    logger.info("fetched %d advocates", len(advocates))
    return advocates
