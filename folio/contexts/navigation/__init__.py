"""
Navigation Context

Responsibilities:
- Holds the navigation state and the reducer that changes it
- Produces navigation events from clicks, scrollspy, scroll position and the URL fragment
- Keeps nav links, mobile menu, header and back-to-top in sync with the state
- Reveals fade-in elements as they enter the viewport

Owns: NavigationState, browser environment abstraction
Never: Renders content
"""

from folio.contexts.navigation.animation import AnimationTrigger
from folio.contexts.navigation.controller import NavigationController
from folio.contexts.navigation.environment import (
    BrowserEnvironment,
    HeadlessEnvironment,
    IntersectionEntry,
    parse_root_margin,
)
from folio.contexts.navigation.state import (
    ContentLoaded,
    HashChanged,
    MenuToggled,
    NavigationState,
    ScrollPositionChanged,
    SectionActivated,
    reduce,
)

__all__ = [
    # State
    "NavigationState",
    "reduce",
    "ContentLoaded",
    "SectionActivated",
    "ScrollPositionChanged",
    "HashChanged",
    "MenuToggled",
    # Environment
    "BrowserEnvironment",
    "HeadlessEnvironment",
    "IntersectionEntry",
    "parse_root_margin",
    # Producers
    "NavigationController",
    "AnimationTrigger",
]
