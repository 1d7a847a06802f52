"""Integration tests for PortfolioApp start-up, render isolation, error hooks and snapshots."""

import asyncio
import sys
import threading

import pytest

from folio.bootstrap import (
    PortfolioApp,
    install_error_handlers,
    log_async_exception,
    log_thread_exception,
    log_uncaught_exception,
    render_snapshot,
)
from folio.contexts.content.defaults import get_fallback_content
from folio.contexts.content.loader import ContentLoader
from folio.contexts.navigation.environment import BrowserEnvironment, HeadlessEnvironment
from folio.contexts.rendering.dom import DomDocument


class ExplodingLoader:
    def load(self):
        raise RuntimeError("loader exploded")


@pytest.fixture
def app(document, environment, settings, content_file):
    return PortfolioApp(document, environment, settings, loader=ContentLoader(str(content_file)))


@pytest.mark.integration
def test_start_loads_renders_and_installs(app):
    state = app.start()

    assert state.content.about.name == "Ada King Lovelace"
    assert not state.navigation.is_loading
    assert state.render_failures == []
    assert app.document.by_test_id("text-role-1").get_text() == "Intern"
    assert app.document.by_test_id("text-contact-email-value").get_text() == "ada@example.com"
    assert app.document.by_id("current-year").get_text().isdigit()
    assert app.navigation.installed
    assert not app.animation.installed


@pytest.mark.integration
def test_animations_install_after_delay(app):
    app.start()

    app.environment.advance(99)
    assert not app.animation.installed

    app.environment.advance(1)
    assert app.animation.installed
    assert app.animation.observer is not None


@pytest.mark.integration
def test_failing_renderer_is_isolated(app, monkeypatch):
    def broken(*args, **kwargs):
        raise ValueError("bad card")

    monkeypatch.setattr(app.renderer, "render_projects", broken)
    state = app.start()

    assert [failure.section for failure in state.render_failures] == ["projects"]
    assert isinstance(state.render_failures[0].original_error, ValueError)
    assert app.document.by_test_id("text-cert-name-0").get_text() == "CompTIA Security+"
    assert app.document.by_test_id("text-hobby-0").get_text() == "Poetry"
    assert app.navigation.installed


@pytest.mark.integration
def test_fallback_content_still_renders(document, environment, settings, tmp_path):
    app = PortfolioApp(
        document, environment, settings, loader=ContentLoader("missing.json", site_root=tmp_path)
    )
    state = app.start()

    assert state.content == get_fallback_content()
    assert not state.navigation.is_loading
    assert document.by_test_id("text-name").get_text() == "Jubin Raj"
    assert document.by_test_id("text-surname").get_text() == "Nirmal"
    assert document.query("#experience-timeline").contents == []


@pytest.mark.integration
def test_undecodable_content_file_still_renders(document, environment, settings, tmp_path):
    (tmp_path / "data.json").write_bytes(b'{"about": {"name": "\xff\xfe"}}')
    app = PortfolioApp(
        document, environment, settings, loader=ContentLoader("data.json", site_root=tmp_path)
    )
    state = app.start()

    assert state.content == get_fallback_content()
    assert not state.navigation.is_loading
    assert app.navigation.installed


@pytest.mark.integration
def test_unexpected_start_failure_shows_error(document, environment, settings, log_messages):
    app = PortfolioApp(document, environment, settings, loader=ExplodingLoader())
    state = app.start()

    assert document.by_test_id("text-hero-title").get_text() == "Error loading portfolio data"
    assert state.content is None
    assert any("Error initializing portfolio" in message for message in log_messages)


@pytest.mark.integration
def test_error_handlers_install_and_restore():
    previous_sys = sys.excepthook
    previous_threading = threading.excepthook

    handlers = install_error_handlers()
    assert sys.excepthook is log_uncaught_exception
    assert threading.excepthook is log_thread_exception

    handlers.uninstall()
    assert sys.excepthook is previous_sys
    assert threading.excepthook is previous_threading


@pytest.mark.integration
def test_uncaught_exception_is_logged(log_messages):
    try:
        raise KeyError("missing")
    except KeyError as e:
        log_uncaught_exception(type(e), e, e.__traceback__)

    assert any("[app] Global error: 'missing'" in message for message in log_messages)


@pytest.mark.integration
def test_thread_exception_is_logged(log_messages):
    handlers = install_error_handlers()
    try:
        worker = threading.Thread(target=lambda: 1 / 0, name="worker-1")
        worker.start()
        worker.join()
    finally:
        handlers.uninstall()

    assert any("worker-1" in message and "division by zero" in message for message in log_messages)


@pytest.mark.integration
def test_async_exception_handler(log_messages):
    loop = asyncio.new_event_loop()
    try:
        handlers = install_error_handlers(loop)
        assert loop.get_exception_handler() is log_async_exception

        loop.call_exception_handler({"message": "boom", "exception": ValueError("bad future")})
        loop.call_exception_handler({"message": "no exception attached"})

        handlers.uninstall()
        assert loop.get_exception_handler() is None
    finally:
        loop.close()

    assert any("Unhandled async exception: bad future" in message for message in log_messages)
    assert any("no exception attached" in message for message in log_messages)


@pytest.mark.integration
def test_render_snapshot_of_shipped_site(settings):
    html, state = render_snapshot(settings=settings)
    document = DomDocument(html)

    assert state.render_failures == []
    assert state.navigation.active_section_id == "about"
    assert document.by_test_id("text-role-0") is not None
    assert len(document.query_all("#contact-methods .contact-method")) == 3
    assert "visible" in document.query("#about .fade-in")["class"]


@pytest.mark.integration
def test_render_snapshot_with_hash(settings):
    html, state = render_snapshot(settings=settings, location_hash="#projects")
    document = DomDocument(html)

    assert state.navigation.active_section_id == "projects"
    assert state.navigation.is_scrolled
    assert "active" in document.query('.nav-link[href="#projects"]')["class"]
    assert "scrolled" in document.by_id("header")["class"]


@pytest.mark.integration
def test_render_snapshot_reduced_motion(settings):
    html, _ = render_snapshot(settings=settings, reduced_motion=True)
    document = DomDocument(html)

    fade_ins = document.query_all(".fade-in")
    assert fade_ins
    assert all("visible" in element["class"] for element in fade_ins)


@pytest.mark.integration
def test_environment_is_abstract():
    with pytest.raises(TypeError):
        BrowserEnvironment()
    assert isinstance(HeadlessEnvironment(), BrowserEnvironment)
