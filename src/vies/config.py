from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Tuple

SHEET_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vR7K0lF7k4iZ1OSbuavBjG47LES1A-FpnnqUOlqzVfGlRTI-ZQrkR6C-3tFUyPAOg065EBgxFzotBKt"
    "/pub?output=csv"
)

# Tried in order; first 2xx wins
PROXIES: Tuple[str, ...] = (
    "https://corsproxy.io/?",
    "https://api.codetabs.com/v1/proxy?quest=",
    "https://api.allorigins.win/raw?url=",
)

TIMEOUT_SEC = 15
USER_AGENT = ("Mozilla/5.0 (Macintosh; Intel Mac OS X) AppleWebKit/537.36 "
              "(KHTML, like Gecko) Chrome/125.0 Safari/537.36")


@dataclass(frozen=True)
class Settings:
    sheet_url: str = SHEET_URL
    proxies: Tuple[str, ...] = field(default=PROXIES)
    timeout: float = TIMEOUT_SEC

    @classmethod
    def from_env(cls) -> "Settings":
        """Override defaults from VIES_SHEET_URL, VIES_PROXIES (comma-separated) and VIES_TIMEOUT_SEC."""
        proxies = os.environ.get("VIES_PROXIES")
        timeout = os.environ.get("VIES_TIMEOUT_SEC")
        return cls(
            sheet_url=os.environ.get("VIES_SHEET_URL") or SHEET_URL,
            # an empty entry means "no proxy"
            proxies=tuple(p.strip() for p in proxies.split(",")) if proxies is not None else PROXIES,
            timeout=float(timeout) if timeout else TIMEOUT_SEC,
        )
