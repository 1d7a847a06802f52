"""Unit tests for the navigation reducer."""

import pytest

from folio.contexts.navigation.state import (
    CLICK,
    DEFAULT_SECTION,
    SCROLLSPY,
    ContentLoaded,
    HashChanged,
    MenuToggled,
    NavigationState,
    ScrollPositionChanged,
    SectionActivated,
    reduce,
)


@pytest.mark.unit
def test_initial_state():
    state = NavigationState()
    assert state.active_section_id == DEFAULT_SECTION == "about"
    assert not state.is_mobile_menu_open
    assert state.is_loading
    assert not state.is_scrolled


@pytest.mark.unit
def test_content_loaded_clears_loading_once():
    loaded = reduce(NavigationState(), ContentLoaded())
    assert not loaded.is_loading
    assert reduce(loaded, ContentLoaded()) is loaded


@pytest.mark.unit
def test_most_recent_section_activation_wins():
    """Click and scrollspy events are applied in arrival order."""
    events = [
        SectionActivated("projects", CLICK),
        SectionActivated("education", SCROLLSPY),
        SectionActivated("projects", SCROLLSPY),
        SectionActivated("contact", CLICK),
    ]
    state = NavigationState()
    for event in events:
        state = reduce(state, event)
    assert state.active_section_id == "contact"


@pytest.mark.unit
def test_same_section_returns_same_state():
    state = NavigationState()
    assert reduce(state, SectionActivated("about")) is state


@pytest.mark.unit
def test_empty_section_id_ignored():
    state = NavigationState()
    assert reduce(state, SectionActivated("")) is state


@pytest.mark.unit
def test_hash_change_never_changes_active_section():
    state = NavigationState(active_section_id="projects")
    assert reduce(state, HashChanged("#contact")) is state


@pytest.mark.unit
@pytest.mark.parametrize(
    "scroll_top, expected",
    [(0, False), (100, False), (101, True), (2500, True)],
)
def test_scroll_threshold_is_strict(scroll_top, expected):
    state = reduce(NavigationState(), ScrollPositionChanged(scroll_top, 100))
    assert state.is_scrolled is expected


@pytest.mark.unit
def test_menu_toggle_and_explicit_close():
    opened = reduce(NavigationState(), MenuToggled())
    assert opened.is_mobile_menu_open

    closed = reduce(opened, MenuToggled())
    assert not closed.is_mobile_menu_open

    assert reduce(closed, MenuToggled(False)) is closed
    assert reduce(closed, MenuToggled(True)).is_mobile_menu_open


@pytest.mark.unit
def test_events_only_touch_their_field():
    state = NavigationState(active_section_id="projects", is_mobile_menu_open=True)
    state = reduce(state, ScrollPositionChanged(500, 100))
    assert state.active_section_id == "projects"
    assert state.is_mobile_menu_open


@pytest.mark.unit
def test_unknown_event_raises():
    with pytest.raises(TypeError):
        reduce(NavigationState(), "scroll")
