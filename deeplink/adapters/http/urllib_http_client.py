"""
HTTP client adapter built on urllib.
"""

import logging
import re
import urllib.error
import urllib.request
from typing import Optional
from urllib.parse import urlparse

from deeplink.exceptions import HttpClientError
from deeplink.ports.http.http_client_port import HttpClientPort, HttpResponse


class UrllibHttpClient(HttpClientPort):
    """GET-only HTTP client. Error statuses are returned, not raised."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: Optional[str] = None,
        max_bytes: int = 10 * 1024 * 1024,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._timeout = timeout
        self._max_bytes = max_bytes
        self._user_agent = user_agent or "bfemulator-deeplink/1.0"
        self._logger = logger or logging.getLogger(__name__)

    def get(self, url: str) -> HttpResponse:
        self._validate_url(url)
        headers = {
            "User-Agent": self._user_agent,
            "Accept": "application/json, text/plain, */*",
        }
        req = urllib.request.Request(url, headers=headers, method="GET")
        self._logger.debug(f"GET {url}")
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:  # nosec - deep-link URL
                return HttpResponse(
                    status_code=resp.status,
                    body=self._decode(
                        self._read_limited(resp, url), resp.headers.get("Content-Type", "")
                    ),
                    status_text=resp.reason or "",
                    headers=dict(resp.headers.items()),
                )
        except urllib.error.HTTPError as e:
            try:
                raw = e.read(self._max_bytes)
            except Exception:
                raw = b""
            headers_map = dict(e.headers.items()) if e.headers else {}
            return HttpResponse(
                status_code=e.code,
                body=self._decode(raw, headers_map.get("Content-Type", "")),
                status_text=str(e.reason or ""),
                headers=headers_map,
            )
        except urllib.error.URLError as e:
            raise HttpClientError(f"URL error: {e.reason}")
        except HttpClientError:
            raise
        except Exception as e:
            raise HttpClientError(f"Fetch failed: {e}")

    # ---------------- private helpers ----------------
    def _validate_url(self, url: str) -> None:
        p = urlparse(url or "")
        if p.scheme not in ("http", "https"):
            raise HttpClientError(f"Only http/https URLs are supported: {url!r}")
        if not p.netloc:
            raise HttpClientError(f"Invalid URL: missing host: {url!r}")

    def _read_limited(self, resp, url: str) -> bytes:
        raw = resp.read(self._max_bytes + 1)
        if len(raw) > self._max_bytes:
            raise HttpClientError(
                f"Response from {url} exceeds the {self._max_bytes} byte limit"
            )
        return raw

    def _decode(self, raw: bytes, content_type: str) -> str:
        m = re.search(r"charset=([\w\-]+)", content_type or "", re.IGNORECASE)
        charset = m.group(1) if m else "utf-8"
        try:
            return raw.decode(charset, errors="replace")
        except LookupError:
            return raw.decode("utf-8", errors="replace")
