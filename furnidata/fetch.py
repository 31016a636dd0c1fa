"""HTTP transport: download furnidata text and hand it to the decoder."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from furnidata.config import DEFAULT_TIMEOUT, USER_AGENT
from furnidata.furni.decoders import decode
from furnidata.furni.records import FurniItem

log = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """Furnidata could not be downloaded."""


def fetch_text(url: str, session: Optional[requests.Session] = None,
               timeout: float = DEFAULT_TIMEOUT) -> str:
    """GET url and return the decoded response body.

    Redirects (including 307/308 to the CDN) are followed by requests.
    """
    http = session or requests.Session()
    log.debug("GET %s", url)
    try:
        response = http.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e
    finally:
        if session is None:
            http.close()

    if response.url and response.url != url:
        log.debug("Redirected to %s", response.url)
    log.debug("HTTP %s, %d chars", response.status_code, len(response.text))
    return response.text


def fetch_items(url: str, session: Optional[requests.Session] = None,
                timeout: float = DEFAULT_TIMEOUT) -> list[FurniItem]:
    """Download and decode furnidata from url."""
    return decode(fetch_text(url, session=session, timeout=timeout))
