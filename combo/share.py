from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from .codec import DecodeError, decode, encode
from .scenario import Scenario

logger = logging.getLogger(__name__)

QUERY_PARAM = "combo"


def build_share_link(page_url: str, token: str) -> str:
    """Put ``token`` in the ``combo`` query parameter of ``page_url``.

    Any previous ``combo`` value is replaced; everything else in the URL is
    kept as is.
    """
    parts = urlsplit(page_url)
    kept = [
        segment
        for segment in parts.query.split("&")
        if segment and segment.split("=", 1)[0] != QUERY_PARAM
    ]
    kept.append(urlencode({QUERY_PARAM: token}))
    return urlunsplit(parts._replace(query="&".join(kept)))


def token_from_query(query: str) -> Optional[str]:
    values = parse_qs(query.lstrip("?")).get(QUERY_PARAM)
    return values[0] if values else None


def token_from_url(url: str) -> Optional[str]:
    return token_from_query(urlsplit(url).query)


def share_link_for(scenario: Scenario, page_url: str) -> str:
    return build_share_link(page_url, encode(scenario))


def scenario_from_query(query: str) -> Scenario:
    """Scenario to seed a page with, given its query string.

    No ``combo`` parameter means a fresh default scenario. A malformed token
    is dropped and also yields the defaults.
    """
    token = token_from_query(query)
    if not token:
        return Scenario()
    try:
        return decode(token)
    except DecodeError as exc:
        logger.warning(f"Ignoring unreadable {QUERY_PARAM!r} parameter: {exc}")
        return Scenario()
