"""Integration tests for ContentLoader against files and a stubbed HTTP session."""

import pytest
import requests

from folio.contexts.content.defaults import get_fallback_content
from folio.contexts.content.exceptions import ContentLoadError
from folio.contexts.content.loader import ContentLoader, is_url
from folio.utils.config import SITE_ROOT


class StubResponse:
    def __init__(self, status_code=200, payload=None, json_error=None):
        self.status_code = status_code
        self.ok = 200 <= status_code < 400
        self._payload = payload
        self._json_error = json_error

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class StubSession:
    """Records requests and replays a canned response or error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


URL = "https://example.com/src/data.json"


@pytest.mark.integration
def test_is_url():
    assert is_url("https://example.com/data.json")
    assert is_url("HTTP://example.com/data.json")
    assert not is_url("src/data.json")


@pytest.mark.integration
def test_load_from_file(content_file):
    content = ContentLoader(str(content_file)).load()

    assert content.about.name == "Ada King Lovelace"
    assert len(content.experience) == 2


@pytest.mark.integration
def test_relative_source_resolves_against_site_root(tmp_path, content_file):
    loader = ContentLoader("data.json", site_root=tmp_path)

    assert loader.resolved_source == str(tmp_path / "data.json")
    assert loader.load().about.email == "ada@example.com"


@pytest.mark.integration
def test_shipped_content_document_loads():
    """The site's own data.json loads without falling back."""
    content = ContentLoader(site_root=SITE_ROOT).fetch()
    assert content.about.name == "Jubin Raj Nirmal"
    assert content.experience


@pytest.mark.integration
def test_load_from_url_uses_timeout(sample_document):
    session = StubSession(StubResponse(200, sample_document))
    content = ContentLoader(URL, timeout_s=2.5, session=session).load()

    assert content.about.name == "Ada King Lovelace"
    assert session.calls == [(URL, 2.5)]


@pytest.mark.integration
@pytest.mark.parametrize(
    "session",
    [
        StubSession(StubResponse(404)),
        StubSession(StubResponse(500)),
        StubSession(error=requests.ConnectionError("connection refused")),
        StubSession(error=requests.Timeout("timed out")),
        StubSession(StubResponse(200, json_error=ValueError("Expecting value"))),
        StubSession(StubResponse(200, ["not", "an", "object"])),
        StubSession(StubResponse(200, {"experience": ["QA Engineer"]})),
    ],
)
def test_load_falls_back_on_any_failure(session, log_messages):
    content = ContentLoader(URL, session=session).load()

    assert content == get_fallback_content()
    assert any("ERROR" in message and "fallback" in message for message in log_messages)


@pytest.mark.integration
def test_fetch_reports_http_status():
    loader = ContentLoader(URL, session=StubSession(StubResponse(503)))

    with pytest.raises(ContentLoadError) as excinfo:
        loader.fetch()

    assert excinfo.value.status_code == 503
    assert "HTTP error! status: 503" in str(excinfo.value)
    assert excinfo.value.source == URL


@pytest.mark.integration
def test_fetch_missing_file(tmp_path):
    with pytest.raises(ContentLoadError) as excinfo:
        ContentLoader("missing.json", site_root=tmp_path).fetch()
    assert isinstance(excinfo.value.original_error, OSError)


@pytest.mark.integration
def test_fetch_invalid_json(tmp_path):
    (tmp_path / "data.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ContentLoadError, match="Invalid JSON"):
        ContentLoader("data.json", site_root=tmp_path).fetch()


@pytest.mark.integration
def test_fetch_malformed_record(tmp_path):
    (tmp_path / "data.json").write_text('{"projects": ["just a name"]}', encoding="utf-8")

    with pytest.raises(ContentLoadError, match="Malformed content document"):
        ContentLoader("data.json", site_root=tmp_path).fetch()


@pytest.mark.integration
def test_fetch_file_not_utf8(tmp_path):
    (tmp_path / "data.json").write_bytes(b'{"about": {"name": "\xff\xfe"}}')

    with pytest.raises(ContentLoadError) as excinfo:
        ContentLoader("data.json", site_root=tmp_path).fetch()
    assert isinstance(excinfo.value.original_error, UnicodeDecodeError)


@pytest.mark.integration
def test_load_over_nested_file_falls_back(tmp_path):
    depth = 100000
    (tmp_path / "data.json").write_text("[" * depth + "]" * depth, encoding="utf-8")

    content = ContentLoader("data.json", site_root=tmp_path).load()

    assert content == get_fallback_content()


@pytest.mark.integration
def test_load_over_nested_response_falls_back():
    session = StubSession(StubResponse(200, json_error=RecursionError("maximum recursion depth exceeded")))

    content = ContentLoader(URL, session=session).load()

    assert content == get_fallback_content()
