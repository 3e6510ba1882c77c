from __future__ import annotations

import hashlib
import logging

import httpx

from pwpolicy.exceptions import BreachLookupError

logger = logging.getLogger(__name__)

HIBP_BASE_URL = "https://api.pwnedpasswords.com"


def _sha1_hex(pw: str) -> str:
    return hashlib.sha1(pw.encode("utf-8")).hexdigest().upper()


class HIBPChecker:
    """Breached-password lookup using the Have I Been Pwned k-anonymity range API.

    Only the first five hex characters of the SHA-1 digest leave the process;
    the remaining suffix is matched locally against the returned ``SUFFIX:COUNT``
    lines. Pass ``client`` to reuse a pooled ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        *,
        base_url: str = HIBP_BASE_URL,
        timeout_seconds: float = 5.0,
        min_count: int = 1,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout_seconds)
        self.min_count = min_count
        self._client = client

    async def _fetch_range(self, prefix: str) -> str:
        url = f"{self.base_url}/range/{prefix}"
        logger.debug("Breach range lookup for prefix %s", prefix)
        headers = {"Add-Padding": "true"}
        if self._client is not None:
            resp = await self._client.get(url, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, headers=headers)
        resp.raise_for_status()
        return resp.text

    async def __call__(self, pw: str) -> bool:
        digest = _sha1_hex(pw)
        prefix, suffix = digest[:5], digest[5:]
        body = await self._fetch_range(prefix)
        for line in body.splitlines():
            candidate, _, count = line.strip().partition(":")
            if candidate.upper() != suffix:
                continue
            try:
                seen = int(count)
            except ValueError as exc:
                raise BreachLookupError(
                    f"Malformed count {count!r} in breach range response for prefix {prefix}"
                ) from exc
            return seen >= self.min_count
        return False


__all__ = ["HIBP_BASE_URL", "HIBPChecker"]
