"""Fetch the sheet export through a chain of CORS mirror proxies."""
from __future__ import annotations
import logging
import time
from typing import Optional, Sequence
from urllib.parse import quote

import requests

from .config import PROXIES, TIMEOUT_SEC, USER_AGENT

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """Every proxy failed; no text was retrieved."""


def with_cache_buster(url: str, now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{url}&t={now_ms}"


def proxied_url(proxy: str, url: str) -> str:
    """Proxy prefix + fully percent-encoded target. An empty prefix fetches directly."""
    if not proxy:
        return url
    return f"{proxy}{quote(url, safe='')}"


def make_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Cache-Control": "no-store",
    })
    return session


def fetch_with_fallback(
    url: str,
    proxies: Sequence[str] = PROXIES,
    session: Optional[requests.Session] = None,
    timeout: float = TIMEOUT_SEC,
) -> str:
    """
    Return the body of the first proxy that answers with a 2xx status.

    Proxies are tried once each, in order. Network errors and non-2xx
    responses move on to the next one; if none succeeds, FetchError.
    """
    session = session or make_session()
    target = with_cache_buster(url)

    for proxy in proxies:
        logger.info("Trying proxy: %s", proxy or "(direct)")
        try:
            resp = session.get(proxied_url(proxy, target), timeout=timeout)
        except requests.RequestException as exc:
            logger.warning("Proxy %s failed (%s), trying next...", proxy, exc)
            continue
        if 200 <= resp.status_code < 300:
            return resp.text
        logger.warning("Proxy %s answered %s, trying next...", proxy, resp.status_code)

    raise FetchError("All proxies failed")
