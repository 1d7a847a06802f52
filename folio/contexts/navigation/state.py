"""
Navigation State

The page's navigation state and the single reducer that changes it.

Every producer (click to scroll, scrollspy, scroll position, hash changes, the
mobile menu button, the content load) turns what happened into an event and
hands it to reduce(). Nothing else writes NavigationState. Because events are
applied one at a time in arrival order, the active section is always the one
named by the most recent SectionActivated event, whatever produced it.
"""

from dataclasses import dataclass, replace
from typing import Optional, Union

DEFAULT_SECTION = "about"

# SectionActivated sources
CLICK = "click"
SCROLLSPY = "scrollspy"


@dataclass(frozen=True)
class NavigationState:
    """
    Navigation state for one page lifetime.

    Attributes:
        active_section_id: Section currently marked active in the navigation
        is_mobile_menu_open: Whether the mobile navigation is shown
        is_loading: True until the content load settles
        is_scrolled: Whether vertical scroll is past the chrome threshold
    """

    active_section_id: str = DEFAULT_SECTION
    is_mobile_menu_open: bool = False
    is_loading: bool = True
    is_scrolled: bool = False


@dataclass(frozen=True)
class ContentLoaded:
    """Content load settled (real or fallback document)."""


@dataclass(frozen=True)
class SectionActivated:
    """A section became active, from a nav click or from scrollspy."""

    section_id: str
    source: str = SCROLLSPY


@dataclass(frozen=True)
class ScrollPositionChanged:
    """Debounced vertical scroll position."""

    scroll_top: float
    threshold: float


@dataclass(frozen=True)
class HashChanged:
    """URL fragment changed; scrolling is handled by the controller."""

    fragment: str


@dataclass(frozen=True)
class MenuToggled:
    """Mobile menu request: open=None flips the menu, True/False sets it."""

    open: Optional[bool] = None


NavigationEvent = Union[
    ContentLoaded, SectionActivated, ScrollPositionChanged, HashChanged, MenuToggled
]


def reduce(state: NavigationState, event: NavigationEvent) -> NavigationState:
    """
    Apply one event to the navigation state.

    Args:
        state: Current state
        event: Event to apply

    Returns:
        New state (the same object when the event changes nothing)

    Raises:
        TypeError: If event is not a navigation event
    """
    if isinstance(event, ContentLoaded):
        return state if not state.is_loading else replace(state, is_loading=False)

    if isinstance(event, SectionActivated):
        if not event.section_id or event.section_id == state.active_section_id:
            return state
        return replace(state, active_section_id=event.section_id)

    if isinstance(event, ScrollPositionChanged):
        is_scrolled = event.scroll_top > event.threshold
        return state if is_scrolled == state.is_scrolled else replace(state, is_scrolled=is_scrolled)

    if isinstance(event, HashChanged):
        # Hash routing only scrolls; scrollspy reports the section once it arrives
        return state

    if isinstance(event, MenuToggled):
        is_open = (not state.is_mobile_menu_open) if event.open is None else event.open
        if is_open == state.is_mobile_menu_open:
            return state
        return replace(state, is_mobile_menu_open=is_open)

    raise TypeError(f"Unknown navigation event: {event!r}")
