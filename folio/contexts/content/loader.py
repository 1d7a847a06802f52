"""
Content Loader

Fetches the portfolio content document and turns it into PortfolioContent.

Failures never reach the caller of load(): any transport, status, parse or
shape error is logged and the fixed fallback document is returned instead.
Callers that need the failure (e.g. a content check) use fetch() directly.
"""

import json
import time
from pathlib import Path
from typing import Any, Optional

import requests

from folio.contexts.content.defaults import get_fallback_content
from folio.contexts.content.exceptions import ContentLoadError, InvalidContentError
from folio.contexts.content.logger import _log_debug, log_load_failure, log_load_result
from folio.contexts.content.portfolio_data_structure import PortfolioContent
from folio.utils.config import SITE_ROOT

DEFAULT_SOURCE = "src/data.json"
DEFAULT_TIMEOUT_S = 5.0
URL_SCHEMES = ("http://", "https://")


def is_url(source: str) -> bool:
    """True if the source is fetched over HTTP rather than read from disk."""
    return source.lower().startswith(URL_SCHEMES)


class ContentLoader:
    """Loads the content document from a URL or a path under the site root."""

    def __init__(
        self,
        source: str = DEFAULT_SOURCE,
        site_root: Path = SITE_ROOT,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            source: http(s) URL, absolute path, or path relative to site_root
            site_root: Directory relative sources resolve against
            timeout_s: Request timeout for URL sources
            session: Optional requests session (defaults to module-level requests)
        """
        self.source = str(source)
        self.site_root = Path(site_root)
        self.timeout_s = timeout_s
        self.session = session

    @property
    def resolved_source(self) -> str:
        """Source as it will actually be fetched (URL or absolute path)."""
        if is_url(self.source):
            return self.source
        path = Path(self.source)
        if not path.is_absolute():
            path = self.site_root / path
        return str(path)

    def load(self) -> PortfolioContent:
        """
        Load content, falling back to the fixed fallback document on any failure.

        Returns:
            Loaded content, or the fallback content
        """
        start_time = time.time()
        try:
            content = self.fetch()
        except ContentLoadError as e:
            log_load_failure(e)
            return get_fallback_content()

        log_load_result(self.resolved_source, content, time.time() - start_time)
        return content

    def fetch(self) -> PortfolioContent:
        """
        Fetch and parse the content document.

        Returns:
            Loaded content

        Raises:
            ContentLoadError: On transport, status, parse or shape failure
        """
        source = self.resolved_source
        _log_debug(f"Fetching content from {source}")

        if is_url(source):
            document = self._fetch_url(source)
        else:
            document = self._read_file(Path(source))

        try:
            return PortfolioContent.from_dict(document)
        except InvalidContentError as e:
            raise ContentLoadError("Malformed content document", source=source, original_error=e) from e

    def _fetch_url(self, url: str) -> Any:
        http = self.session or requests
        try:
            response = http.get(url, timeout=self.timeout_s)
        except requests.RequestException as e:
            raise ContentLoadError("Request failed", source=url, original_error=e) from e

        if not response.ok:
            raise ContentLoadError(
                f"HTTP error! status: {response.status_code}",
                source=url,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except (ValueError, RecursionError) as e:
            raise ContentLoadError("Invalid JSON", source=url, original_error=e) from e

    def _read_file(self, path: Path) -> Any:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ContentLoadError("Content file is not UTF-8", source=str(path), original_error=e) from e
        except OSError as e:
            raise ContentLoadError("Content file not readable", source=str(path), original_error=e) from e

        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise ContentLoadError("Invalid JSON", source=str(path), original_error=e) from e
