"""
Browser Environment

The page logic only needs a few capabilities from its host: a scroll position
it can change, the URL fragment, the reduced-motion preference, timers,
element offsets and viewport intersection observation. BrowserEnvironment
names those capabilities; HeadlessEnvironment implements them deterministically
with a virtual clock and explicit layout boxes so the page can run without a
browser (CLI snapshots, tests).

Headless semantics:
- Timers run only when the clock is advanced (advance()/flush()).
- Scrolls are instantaneous; the requested behavior is recorded in scroll_log.
- Intersection entries are delivered asynchronously, as a 0 ms task queued
  after an observe() or a scroll, and only for targets whose state changed
  (plus one initial entry per newly observed target).
- A target is intersecting when it overlaps the root-margin-adjusted viewport
  and the overlapping fraction of its height reaches the observer threshold.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from bs4 import Tag

SMOOTH = "smooth"
INSTANT = "auto"
SCROLL = "scroll"
HASHCHANGE = "hashchange"

MARGIN_TOKEN = re.compile(r"^(-?\d+(?:\.\d+)?)(px|%)?$")


@dataclass(frozen=True)
class RootMargin:
    """Root margin offsets in CSS order; each is (value, unit) with unit "px" or "%"."""

    top: Tuple[float, str]
    right: Tuple[float, str]
    bottom: Tuple[float, str]
    left: Tuple[float, str]

    def resolve_vertical(self, viewport_height: float) -> Tuple[float, float]:
        """Top and bottom margins in pixels for a given viewport height."""
        return _to_px(self.top, viewport_height), _to_px(self.bottom, viewport_height)


def _to_px(offset: Tuple[float, str], reference: float) -> float:
    value, unit = offset
    return value * reference / 100.0 if unit == "%" else value


def parse_root_margin(margin: str) -> RootMargin:
    """
    Parse a CSS-style root margin ("10px", "-100px 0px -50% 0px", ...).

    Raises:
        ValueError: If a token is not a px/% length or there are more than 4 tokens
    """
    tokens = margin.split()
    if not 1 <= len(tokens) <= 4:
        raise ValueError(f"Root margin must have 1 to 4 values: {margin!r}")

    offsets = []
    for token in tokens:
        match = MARGIN_TOKEN.match(token)
        if match is None:
            raise ValueError(f"Invalid root margin value {token!r} in {margin!r}")
        value = float(match.group(1))
        unit = match.group(2) or "px"
        if unit == "px" and match.group(2) is None and value != 0:
            raise ValueError(f"Root margin value {token!r} needs a unit")
        offsets.append((value, unit))

    # CSS shorthand expansion
    if len(offsets) == 1:
        offsets = offsets * 4
    elif len(offsets) == 2:
        offsets = [offsets[0], offsets[1], offsets[0], offsets[1]]
    elif len(offsets) == 3:
        offsets = [offsets[0], offsets[1], offsets[2], offsets[1]]

    return RootMargin(*offsets)


@dataclass(frozen=True)
class LayoutBox:
    """Vertical placement of an element in page coordinates."""

    top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class IntersectionEntry:
    target: Tag
    is_intersecting: bool
    intersection_ratio: float


class IntersectionObserver:
    """Observer registration: targets plus the callback that receives their entries."""

    def __init__(
        self,
        callback: Callable[[List[IntersectionEntry]], None],
        root_margin: RootMargin,
        threshold: float,
        environment: "BrowserEnvironment",
    ):
        self.callback = callback
        self.root_margin = root_margin
        self.threshold = threshold
        self.environment = environment
        self._targets: List[Tag] = []
        self._last_state: Dict[int, bool] = {}
        self.connected = True

    @property
    def targets(self) -> List[Tag]:
        return list(self._targets)

    def is_observing(self, element: Tag) -> bool:
        return any(target is element for target in self._targets)

    def observe(self, element: Tag) -> None:
        if not self.connected or self.is_observing(element):
            return
        self._targets.append(element)
        self.environment.intersections_changed()

    def unobserve(self, element: Tag) -> None:
        self._targets = [target for target in self._targets if target is not element]
        self._last_state.pop(id(element), None)

    def disconnect(self) -> None:
        self._targets = []
        self._last_state.clear()
        self.connected = False


class BrowserEnvironment(ABC):
    """Capabilities the page logic needs from its host."""

    @abstractmethod
    def prefers_reduced_motion(self) -> bool:
        """True if the user asked for reduced motion."""

    @property
    @abstractmethod
    def scroll_top(self) -> float:
        """Current vertical scroll position."""

    @abstractmethod
    def scroll_to(self, top: float, behavior: str = SMOOTH) -> None:
        """Scroll the page; behavior is "smooth" or "auto" (instant)."""

    @property
    @abstractmethod
    def location_hash(self) -> str:
        """Current URL fragment including "#", or "" when there is none."""

    @abstractmethod
    def offset_top(self, element: Tag) -> float:
        """Top of element in page coordinates."""

    @abstractmethod
    def set_timeout(self, callback: Callable[[], None], delay_ms: float) -> int:
        """Run callback once after delay_ms; returns a handle."""

    @abstractmethod
    def clear_timeout(self, handle: int) -> None:
        """Cancel a pending timeout."""

    @abstractmethod
    def add_event_listener(self, event_type: str, handler: Callable[[], None]) -> None:
        """Listen for window-level "scroll" or "hashchange" events."""

    @abstractmethod
    def create_intersection_observer(
        self,
        callback: Callable[[List[IntersectionEntry]], None],
        root_margin: str = "0px",
        threshold: float = 0.0,
    ) -> IntersectionObserver:
        """Create a viewport intersection observer."""

    @abstractmethod
    def intersections_changed(self) -> None:
        """Called when observation targets change so entries get recomputed."""

    @abstractmethod
    def navigate(self, url: str) -> None:
        """Send the window to url (e.g., a mailto: link)."""

    @abstractmethod
    def download(self, href: str, filename: str) -> None:
        """Start a file download."""


class HeadlessEnvironment(BrowserEnvironment):
    """Deterministic in-memory environment with a virtual clock and explicit layout."""

    def __init__(
        self,
        viewport_height: float = 800.0,
        reduced_motion: bool = False,
        location_hash: str = "",
    ):
        self.viewport_height = viewport_height
        self.reduced_motion = reduced_motion
        self._hash = _normalize_hash(location_hash)
        self._scroll_top = 0.0
        self.now_ms = 0.0

        self._boxes: Dict[int, Tuple[Tag, LayoutBox]] = {}
        self._timers: Dict[int, Tuple[float, int, Callable[[], None]]] = {}
        self._next_handle = 1
        self._listeners: Dict[str, List[Callable[[], None]]] = {SCROLL: [], HASHCHANGE: []}
        self._observers: List[IntersectionObserver] = []
        self._check_pending = False

        self.scroll_log: List[Tuple[float, str]] = []
        self.navigations: List[str] = []
        self.downloads: List[Tuple[str, str]] = []

    # Layout

    def place(self, element: Tag, top: float, height: float) -> LayoutBox:
        """Give element an explicit layout box."""
        box = LayoutBox(top=top, height=height)
        self._boxes[id(element)] = (element, box)
        self.intersections_changed()
        return box

    def stack(self, elements: Sequence[Tag], height: float, start: float = 0.0) -> List[LayoutBox]:
        """Place elements one below the other, each `height` tall."""
        return [
            self.place(element, start + position * height, height)
            for position, element in enumerate(elements)
        ]

    def box_for(self, element: Tag) -> LayoutBox:
        """Explicit box, else the nearest placed ancestor's box, else an empty box at 0."""
        if id(element) in self._boxes:
            return self._boxes[id(element)][1]
        for parent in element.parents:
            if id(parent) in self._boxes:
                return self._boxes[id(parent)][1]
        return LayoutBox(top=0.0, height=0.0)

    def offset_top(self, element: Tag) -> float:
        return self.box_for(element).top

    # Preferences and location

    def prefers_reduced_motion(self) -> bool:
        return self.reduced_motion

    @property
    def location_hash(self) -> str:
        return self._hash

    def set_hash(self, fragment: str) -> None:
        """Change the URL fragment and fire hashchange listeners if it changed."""
        new_hash = _normalize_hash(fragment)
        if new_hash == self._hash:
            return
        self._hash = new_hash
        for handler in list(self._listeners[HASHCHANGE]):
            handler()

    def navigate(self, url: str) -> None:
        self.navigations.append(url)

    def download(self, href: str, filename: str) -> None:
        self.downloads.append((href, filename))

    # Scrolling

    @property
    def scroll_top(self) -> float:
        return self._scroll_top

    def scroll_to(self, top: float, behavior: str = SMOOTH) -> None:
        self.scroll_log.append((top, behavior))
        self._scroll_top = max(0.0, float(top))
        for handler in list(self._listeners[SCROLL]):
            handler()
        self.intersections_changed()

    def add_event_listener(self, event_type: str, handler: Callable[[], None]) -> None:
        if event_type not in self._listeners:
            raise ValueError(f"Unsupported event type: {event_type}")
        self._listeners[event_type].append(handler)

    # Timers

    def set_timeout(self, callback: Callable[[], None], delay_ms: float) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._timers[handle] = (self.now_ms + max(0.0, delay_ms), handle, callback)
        return handle

    def clear_timeout(self, handle: int) -> None:
        self._timers.pop(handle, None)

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    def advance(self, ms: float) -> None:
        """Move the clock forward, running due timers in due-time order."""
        target = self.now_ms + ms
        while True:
            due = [timer for timer in self._timers.values() if timer[0] <= target]
            if not due:
                break
            due_at, handle, callback = min(due)
            del self._timers[handle]
            self.now_ms = due_at
            callback()
        self.now_ms = target

    def flush(self) -> None:
        """Run everything already due, including queued intersection deliveries."""
        self.advance(0)

    # Intersection observation

    @property
    def observers(self) -> List[IntersectionObserver]:
        return [observer for observer in self._observers if observer.connected]

    def create_intersection_observer(
        self,
        callback: Callable[[List[IntersectionEntry]], None],
        root_margin: str = "0px",
        threshold: float = 0.0,
    ) -> IntersectionObserver:
        observer = IntersectionObserver(callback, parse_root_margin(root_margin), threshold, self)
        self._observers.append(observer)
        return observer

    def intersections_changed(self) -> None:
        if self._check_pending:
            return
        self._check_pending = True
        self.set_timeout(self._deliver_intersections, 0)

    def measure(self, element: Tag, root_margin: RootMargin, threshold: float) -> IntersectionEntry:
        """Intersection of element with the root-margin-adjusted viewport."""
        margin_top, margin_bottom = root_margin.resolve_vertical(self.viewport_height)
        root_top = self._scroll_top - margin_top
        root_bottom = self._scroll_top + self.viewport_height + margin_bottom

        box = self.box_for(element)
        overlap = min(box.bottom, root_bottom) - max(box.top, root_top)

        if box.height <= 0:
            inside = root_top <= box.top <= root_bottom
            ratio = 1.0 if inside else 0.0
            return IntersectionEntry(element, inside, ratio)

        if overlap <= 0 or root_bottom <= root_top:
            return IntersectionEntry(element, False, 0.0)

        ratio = min(1.0, overlap / box.height)
        return IntersectionEntry(element, ratio >= threshold, ratio)

    def _deliver_intersections(self) -> None:
        self._check_pending = False
        for observer in self.observers:
            entries = []
            for target in observer.targets:
                entry = self.measure(target, observer.root_margin, observer.threshold)
                previous = observer._last_state.get(id(target))
                if previous is None or previous != entry.is_intersecting:
                    observer._last_state[id(target)] = entry.is_intersecting
                    entries.append(entry)
            if entries:
                observer.callback(entries)


def _normalize_hash(fragment: str) -> str:
    if not fragment or fragment == "#":
        return ""
    return fragment if fragment.startswith("#") else f"#{fragment}"
