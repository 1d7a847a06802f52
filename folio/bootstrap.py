"""
Page Bootstrap

Sequences one page lifetime:

    load content -> ContentLoaded -> render every section -> install navigation
    -> (after a short delay) install fade-in animations

Each renderer runs in isolation: a failing section is logged as a RenderError
and the remaining sections still render. An unexpected failure anywhere else
during start is logged and surfaced in the hero title.

Also provides the process-wide error handlers (uncaught exceptions in the main
thread, in worker threads and in asyncio callbacks) and a headless snapshot
helper used by the render CLI.
"""

import asyncio
import sys
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from omegaconf import DictConfig

from folio.contexts.content.loader import ContentLoader
from folio.contexts.content.portfolio_data_structure import PortfolioContent
from folio.contexts.navigation.animation import AnimationTrigger
from folio.contexts.navigation.controller import SECTIONS, NavigationController
from folio.contexts.navigation.environment import BrowserEnvironment, HeadlessEnvironment
from folio.contexts.navigation.state import ContentLoaded, NavigationState
from folio.contexts.rendering.dom import DomDocument
from folio.contexts.rendering.exceptions import RenderError
from folio.contexts.rendering.logger import log_render_pass
from folio.contexts.rendering.registries import TemplateRegistry
from folio.contexts.rendering.renderers import PortfolioRenderer
from folio.logger import _log_error, _log_exception, _log_info, _log_success
from folio.utils.config import SITE_ROOT, load_settings

HERO_TITLE_TEST_ID = "text-hero-title"
START_ERROR_MESSAGE = "Error loading portfolio data"
SHELL_FILENAME = "index.html"


@dataclass
class AppState:
    """
    Mutable state for one page lifetime, owned by PortfolioApp.

    Attributes:
        content: Loaded content (None until load settles)
        navigation: Current navigation state, written only via the controller's dispatch()
        render_failures: Sections that failed during the last render pass
    """

    content: Optional[PortfolioContent] = None
    navigation: NavigationState = field(default_factory=NavigationState)
    render_failures: List[RenderError] = field(default_factory=list)


class PortfolioApp:
    """Wires loader, renderers, navigation and animation for one document."""

    def __init__(
        self,
        document: DomDocument,
        environment: BrowserEnvironment,
        settings: Optional[DictConfig] = None,
        loader: Optional[ContentLoader] = None,
        template_registry: Optional[TemplateRegistry] = None,
        site_root: Path = SITE_ROOT,
    ):
        self.document = document
        self.environment = environment
        self.settings = settings if settings is not None else load_settings()

        self.loader = loader or ContentLoader(
            source=self.settings.content.source,
            site_root=site_root,
            timeout_s=float(self.settings.content.timeout_s),
        )
        self.state = AppState()
        self.renderer = PortfolioRenderer(document, template_registry)
        self.navigation = NavigationController(document, environment, self.state, self.settings)
        self.animation = AnimationTrigger(document, environment, self.settings)

    def start(self) -> AppState:
        """
        Run the startup sequence.

        Never raises: an unexpected failure is logged and the hero title shows
        an error message instead.
        """
        _log_info("Initializing portfolio...")
        try:
            self.state.content = self.loader.load()
            self.navigation.dispatch(ContentLoaded())

            self.render_all(self.state.content)

            self.navigation.install()
            self.environment.set_timeout(
                self._install_animations, float(self.settings.animation.install_delay_ms)
            )
            _log_success("Portfolio initialized successfully")
        except Exception as e:
            _log_exception(f"Error initializing portfolio: {e}", e)
            hero_title = self.document.by_test_id(HERO_TITLE_TEST_ID)
            if hero_title is not None:
                self.document.set_text(hero_title, START_ERROR_MESSAGE)
        return self.state

    def render_all(self, content: PortfolioContent) -> List[RenderError]:
        """
        Render every section, isolating failures per renderer.

        Returns:
            RenderError for each failed section (also stored on the app state)
        """
        renderer = self.renderer
        sections: List[Tuple[str, Callable[[], None]]] = [
            ("hero", lambda: renderer.render_hero(content.about)),
            ("experience", lambda: renderer.render_experience(content.experience)),
            ("education", lambda: renderer.render_education(content.education)),
            ("projects", lambda: renderer.render_projects(content.projects)),
            ("certifications", lambda: renderer.render_certifications(content.certifications)),
            ("hobbies", lambda: renderer.render_hobbies(content.hobbies)),
            ("contact", lambda: renderer.render_contact_methods(content.about)),
            ("footer", renderer.render_footer_year),
        ]

        rendered = []
        failures = []
        for name, render in sections:
            try:
                render()
                rendered.append(name)
            except Exception as e:
                failures.append(RenderError(f"Error rendering {name}", section=name, original_error=e))

        self.state.render_failures = failures
        log_render_pass(rendered, failures)
        return failures

    def _install_animations(self) -> None:
        self.animation.install()
        self.animation.observe_pending()


def render_snapshot(
    shell_path: Optional[Path] = None,
    settings: Optional[DictConfig] = None,
    reduced_motion: bool = False,
    location_hash: str = "",
    viewport_height: float = 800.0,
    site_root: Path = SITE_ROOT,
) -> Tuple[str, AppState]:
    """
    Run the page headlessly and return the resulting document.

    Sections are laid out one viewport tall each, in document order, and the
    clock is advanced past every startup delay so hash routing, scrollspy and
    the first fade-in reveals have all happened.

    Returns:
        (html, app state)
    """
    settings = settings if settings is not None else load_settings()
    shell_path = Path(shell_path) if shell_path is not None else Path(site_root) / SHELL_FILENAME

    document = DomDocument.from_file(shell_path)
    environment = HeadlessEnvironment(
        viewport_height=viewport_height,
        reduced_motion=reduced_motion,
        location_hash=location_hash,
    )
    app = PortfolioApp(document, environment, settings=settings, site_root=site_root)
    state = app.start()

    environment.stack(document.query_all(SECTIONS), viewport_height)
    settle_ms = max(
        float(settings.animation.install_delay_ms),
        float(settings.navigation.hash_settle_delay_ms),
    ) + float(settings.navigation.debounce_ms)
    environment.advance(settle_ms)
    environment.flush()

    return document.to_html(), state


class ErrorHandlers:
    """Installed process-wide error hooks; uninstall() restores the previous ones."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.loop = loop
        self._previous_excepthook = sys.excepthook
        self._previous_threading_excepthook = threading.excepthook
        self._previous_loop_handler = loop.get_exception_handler() if loop is not None else None
        self.installed = False

    def install(self) -> "ErrorHandlers":
        sys.excepthook = log_uncaught_exception
        threading.excepthook = log_thread_exception
        if self.loop is not None:
            self.loop.set_exception_handler(log_async_exception)
        self.installed = True
        return self

    def uninstall(self) -> None:
        if not self.installed:
            return
        sys.excepthook = self._previous_excepthook
        threading.excepthook = self._previous_threading_excepthook
        if self.loop is not None:
            self.loop.set_exception_handler(self._previous_loop_handler)
        self.installed = False


def install_error_handlers(loop: Optional[asyncio.AbstractEventLoop] = None) -> ErrorHandlers:
    """
    Route uncaught exceptions to the log.

    Args:
        loop: Optional asyncio loop whose unhandled callback exceptions should be logged

    Returns:
        Handle whose uninstall() restores the previous hooks
    """
    return ErrorHandlers(loop).install()


def log_uncaught_exception(exc_type, exc_value, exc_traceback) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    _log_exception(f"Global error: {exc_value}", (exc_type, exc_value, exc_traceback))


def log_thread_exception(args) -> None:
    if args.exc_type is SystemExit:
        return
    thread_name = args.thread.name if args.thread is not None else "unknown"
    _log_exception(
        f"Uncaught error in thread {thread_name}: {args.exc_value}",
        (args.exc_type, args.exc_value, args.exc_traceback),
    )


def log_async_exception(loop, context: dict) -> None:
    error = context.get("exception")
    message = context.get("message", "Unhandled exception in event loop")
    if error is not None:
        _log_exception(f"Unhandled async exception: {error}", error)
    else:
        _log_error(f"Unhandled async exception: {message}")
