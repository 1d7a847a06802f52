"""
Navigation Controller

Turns page interactions into navigation events, applies them with reduce()
and keeps the page chrome in sync with the resulting state.

Producers:
- nav link clicks (click to scroll, optimistic activation)
- scrollspy (one intersection observer over every section[id])
- the URL fragment (initial hash after a settle delay, then hashchange)
- the debounced scroll position (header and back-to-top chrome)
- the mobile menu button, outside clicks and the Escape key

Visual sync only runs for the parts of the state that changed, so replaying
an event that changes nothing leaves the document untouched.
"""

from typing import Iterable, List, Optional

from bs4 import Tag
from omegaconf import DictConfig

from folio.contexts.navigation.environment import (
    HASHCHANGE,
    INSTANT,
    SCROLL,
    SMOOTH,
    BrowserEnvironment,
    IntersectionEntry,
    IntersectionObserver,
)
from folio.contexts.navigation.logger import _log_debug, _log_info, log_transition
from folio.contexts.navigation.state import (
    CLICK,
    SCROLLSPY,
    HashChanged,
    MenuToggled,
    NavigationEvent,
    NavigationState,
    ScrollPositionChanged,
    SectionActivated,
    reduce,
)
from folio.contexts.rendering.dom import DomDocument
from folio.utils.config import load_settings
from folio.utils.debounce import Debouncer

NAV_LINKS = ".nav-link, .nav-link-mobile"
SECTIONS = "section[id]"
HEADER_ID = "header"
BACK_TO_TOP_ID = "back-to-top"
MOBILE_MENU_ID = "nav-mobile"
MOBILE_MENU_BUTTON_ID = "mobile-menu-btn"
CONTACT_SECTION_ID = "contact"

CONTACT_BUTTON = "button-contact"
EMAIL_BUTTON = "button-email"
DOWNLOAD_BUTTONS = ("button-download-resume", "button-download-resume-footer")

RESUME_HREF = "assets/resume.pdf"
RESUME_FILENAME = "Jubin_Raj_Nirmal_Resume.pdf"

ACTIVE_CLASS = "active"
HIDDEN_CLASS = "hidden"
SCROLLED_CLASS = "scrolled"
VISIBLE_CLASS = "visible"


class NavigationController:
    """
    Owns the navigation side of one page lifetime.

    The state itself lives on the orchestrator's AppState (any object with a
    `navigation` attribute, and `content` for the email button); dispatch()
    is the only writer.
    """

    def __init__(
        self,
        document: DomDocument,
        environment: BrowserEnvironment,
        app_state,
        settings: Optional[DictConfig] = None,
    ):
        self.document = document
        self.environment = environment
        self.app_state = app_state

        nav_settings = (settings if settings is not None else load_settings()).navigation
        self.header_offset = float(nav_settings.header_offset)
        self.scroll_threshold = float(nav_settings.scroll_threshold)
        self.debounce_ms = float(nav_settings.debounce_ms)
        self.hash_settle_delay_ms = float(nav_settings.hash_settle_delay_ms)
        self.scrollspy_root_margin = str(nav_settings.scrollspy.root_margin)
        self.scrollspy_threshold = float(nav_settings.scrollspy.threshold)

        self.scrollspy: Optional[IntersectionObserver] = None
        self.scroll_debouncer: Optional[Debouncer] = None
        self.installed = False

    @property
    def state(self) -> NavigationState:
        return self.app_state.navigation

    # State

    def dispatch(self, event: NavigationEvent) -> NavigationState:
        """Apply event to the navigation state and sync whatever changed."""
        previous = self.app_state.navigation
        current = reduce(previous, event)
        if current is previous:
            return current

        self.app_state.navigation = current
        log_transition(event, previous, current)

        if current.active_section_id != previous.active_section_id:
            self._sync_nav_links(current.active_section_id)
        if current.is_mobile_menu_open != previous.is_mobile_menu_open:
            self._sync_mobile_menu(current.is_mobile_menu_open)
        if current.is_scrolled != previous.is_scrolled:
            self._sync_chrome(current.is_scrolled)
        return current

    def sync_all(self) -> None:
        """Bring the whole document in line with the current state."""
        state = self.state
        self._sync_nav_links(state.active_section_id)
        self._sync_mobile_menu(state.is_mobile_menu_open)
        self._sync_chrome(state.is_scrolled)

    # Installation

    def install(self) -> None:
        """Install scroll, scrollspy and hash routing producers (once)."""
        if self.installed:
            return
        self.installed = True

        self.sync_all()
        self._install_scroll_chrome()
        self._install_scrollspy()
        self._install_hash_routing()
        _log_info("Navigation installed")

    def _install_scroll_chrome(self) -> None:
        self.scroll_debouncer = Debouncer(self._on_scroll, self.debounce_ms, self.environment)
        self.environment.add_event_listener(SCROLL, self.scroll_debouncer)

    def _install_scrollspy(self) -> None:
        sections = self.document.query_all(SECTIONS)
        self.scrollspy = self.environment.create_intersection_observer(
            self._on_section_entries,
            root_margin=self.scrollspy_root_margin,
            threshold=self.scrollspy_threshold,
        )
        for section in sections:
            self.scrollspy.observe(section)
        _log_debug(f"Scrollspy observing {len(sections)} sections")

    def _install_hash_routing(self) -> None:
        target = self._hash_target()
        if target is not None:
            self.environment.set_timeout(
                lambda: self.scroll_to_element(target), self.hash_settle_delay_ms
            )
        self.environment.add_event_listener(HASHCHANGE, self._on_hash_change)

    # Producers

    def _on_scroll(self) -> None:
        self.dispatch(ScrollPositionChanged(self.environment.scroll_top, self.scroll_threshold))

    def _on_section_entries(self, entries: List[IntersectionEntry]) -> None:
        for entry in entries:
            if entry.is_intersecting:
                self.dispatch(SectionActivated(entry.target.get("id", ""), SCROLLSPY))

    def _hash_target(self) -> Optional[Tag]:
        fragment = self.environment.location_hash
        if not fragment:
            return None
        return self.document.by_id(fragment[1:])

    def _on_hash_change(self) -> None:
        fragment = self.environment.location_hash
        self.dispatch(HashChanged(fragment))
        target = self._hash_target()
        if target is not None:
            self.scroll_to_element(target)

    # Scrolling

    @property
    def scroll_behavior(self) -> str:
        return INSTANT if self.environment.prefers_reduced_motion() else SMOOTH

    def scroll_to_element(self, element: Tag) -> None:
        """Scroll so element sits just below the fixed header."""
        top = self.environment.offset_top(element) - self.header_offset
        self.environment.scroll_to(top, self.scroll_behavior)

    # Interaction handlers

    def on_nav_click(self, href: str) -> bool:
        """
        Click to scroll for an in-page link.

        Returns:
            True if the link pointed at an existing element and was handled
        """
        if not href or not href.startswith("#"):
            return False
        target_id = href[1:]
        target = self.document.by_id(target_id)
        if target is None:
            _log_debug(f"No element for {href}, click ignored")
            return False

        self.scroll_to_element(target)
        if self.state.is_mobile_menu_open:
            self.dispatch(MenuToggled(False))
        self.dispatch(SectionActivated(target_id, CLICK))
        return True

    def on_menu_button_click(self) -> None:
        if not self._has_mobile_menu():
            return
        self.dispatch(MenuToggled())

    def on_document_click(self, target: Optional[Tag]) -> None:
        """Close the open mobile menu when the click landed outside it and its button."""
        if not self.state.is_mobile_menu_open or not self._has_mobile_menu():
            return
        menu = self.document.by_id(MOBILE_MENU_ID)
        button = self.document.by_id(MOBILE_MENU_BUTTON_ID)
        if self.document.contains(menu, target) or self.document.contains(button, target):
            return
        self.dispatch(MenuToggled(False))

    def on_keydown(self, key: str) -> None:
        if key == "Escape" and self.state.is_mobile_menu_open and self._has_mobile_menu():
            self.dispatch(MenuToggled(False))

    def on_back_to_top_click(self) -> None:
        self.environment.scroll_to(0, self.scroll_behavior)

    def on_contact_click(self) -> None:
        contact = self.document.by_id(CONTACT_SECTION_ID)
        if contact is not None:
            self.scroll_to_element(contact)

    def on_email_click(self) -> None:
        content = getattr(self.app_state, "content", None)
        if content is not None and content.about.email:
            self.environment.navigate(f"mailto:{content.about.email}")

    def on_download_resume_click(self) -> None:
        self.environment.download(RESUME_HREF, RESUME_FILENAME)
        _log_info("Resume download initiated")

    def click(self, element: Tag) -> None:
        """
        Deliver a click on element the way the page's listeners receive it:
        the element's own handler first, then the document-level handler.
        """
        nav_link = _closest(element, self.document.query_all(NAV_LINKS))
        if nav_link is not None:
            self.on_nav_click(nav_link.get("href", ""))
        elif _closest(element, [self.document.by_id(MOBILE_MENU_BUTTON_ID)]) is not None:
            self.on_menu_button_click()
        elif _closest(element, [self.document.by_id(BACK_TO_TOP_ID)]) is not None:
            self.on_back_to_top_click()
        elif _closest(element, self._by_test_ids([CONTACT_BUTTON])) is not None:
            self.on_contact_click()
        elif _closest(element, self._by_test_ids([EMAIL_BUTTON])) is not None:
            self.on_email_click()
        elif _closest(element, self._by_test_ids(DOWNLOAD_BUTTONS)) is not None:
            self.on_download_resume_click()

        self.on_document_click(element)

    # Visual sync

    def _sync_nav_links(self, active_id: str) -> None:
        active_href = f"#{active_id}"
        for link in self.document.query_all(NAV_LINKS):
            self.document.toggle_class(link, ACTIVE_CLASS, link.get("href") == active_href)

    def _sync_mobile_menu(self, is_open: bool) -> None:
        if not self._has_mobile_menu():
            return
        menu = self.document.by_id(MOBILE_MENU_ID)
        button = self.document.by_id(MOBILE_MENU_BUTTON_ID)
        self.document.toggle_class(menu, HIDDEN_CLASS, not is_open)
        self.document.set_attribute(button, "aria-expanded", "true" if is_open else "false")

    def _sync_chrome(self, is_scrolled: bool) -> None:
        header = self.document.by_id(HEADER_ID)
        if header is not None:
            self.document.toggle_class(header, SCROLLED_CLASS, is_scrolled)
        back_to_top = self.document.by_id(BACK_TO_TOP_ID)
        if back_to_top is not None:
            self.document.toggle_class(back_to_top, VISIBLE_CLASS, is_scrolled)

    def _has_mobile_menu(self) -> bool:
        return (
            self.document.by_id(MOBILE_MENU_ID) is not None
            and self.document.by_id(MOBILE_MENU_BUTTON_ID) is not None
        )

    def _by_test_ids(self, test_ids: Iterable[str]) -> List[Tag]:
        return [
            element
            for element in (self.document.by_test_id(test_id) for test_id in test_ids)
            if element is not None
        ]


def _closest(element: Optional[Tag], candidates: Iterable[Optional[Tag]]) -> Optional[Tag]:
    """The nearest of element and its ancestors that is one of candidates."""
    candidates = [candidate for candidate in candidates if candidate is not None]
    if element is None or not candidates:
        return None
    for node in [element, *element.parents]:
        if any(node is candidate for candidate in candidates):
            return node
    return None
