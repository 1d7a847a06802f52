"""Integration tests for the static site server (Flask test client)."""

import pytest
from flask import Flask

from folio.contexts.serving import create_app


@pytest.fixture
def site_root(tmp_path, page_shell):
    (tmp_path / "index.html").write_text(page_shell, encoding="utf-8")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "data.json").write_text('{"hobbies": ["Chess"]}', encoding="utf-8")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "resume.pdf").write_bytes(b"%PDF-1.4 test")
    return tmp_path


@pytest.fixture
def client(site_root):
    app = create_app(site_root)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.mark.integration
def test_create_app(site_root, log_messages):
    app = create_app(site_root)
    assert isinstance(app, Flask)
    assert app.config["SITE_ROOT"] == str(site_root.resolve())
    assert any(message.startswith("DEBUG [serve] Serving site root") for message in log_messages)


@pytest.mark.integration
def test_index_serves_page_shell(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b'id="experience-timeline"' in response.data


@pytest.mark.integration
def test_content_document(client):
    response = client.get("/src/data.json")
    assert response.status_code == 200
    assert response.get_json() == {"hobbies": ["Chess"]}


@pytest.mark.integration
def test_assets(client):
    response = client.get("/assets/resume.pdf")
    assert response.status_code == 200
    assert response.data == b"%PDF-1.4 test"


@pytest.mark.integration
@pytest.mark.parametrize("path", ["/src/missing.json", "/assets/nope.png", "/about", "/src/../index.html"])
def test_unknown_paths_404(client, path):
    assert client.get(path).status_code == 404


@pytest.mark.integration
def test_missing_shell_is_rejected(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_app(tmp_path)


@pytest.mark.integration
def test_default_site_root_serves_shipped_site():
    client = create_app().test_client()
    assert client.get("/").status_code == 200
    assert client.get("/src/data.json").get_json()["about"]["name"] == "Jubin Raj Nirmal"
