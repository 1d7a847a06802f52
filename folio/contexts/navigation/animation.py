"""
Fade-in Animation Trigger

Elements tagged `fade-in` get `visible` the first time they intersect the
viewport. The reveal is one-way: a revealed element is unobserved and later
entries for it change nothing. Under reduced motion every tagged element is
revealed at install and no observer is created.
"""

from typing import List, Optional

from bs4 import Tag
from omegaconf import DictConfig

from folio.contexts.navigation.environment import (
    BrowserEnvironment,
    IntersectionEntry,
    IntersectionObserver,
)
from folio.contexts.navigation.logger import _log_debug
from folio.contexts.rendering.dom import DomDocument
from folio.utils.config import load_settings

FADE_IN = ".fade-in"
PENDING = ".fade-in:not(.visible)"
VISIBLE_CLASS = "visible"


class AnimationTrigger:
    """Reveals fade-in elements as they scroll into view."""

    def __init__(
        self,
        document: DomDocument,
        environment: BrowserEnvironment,
        settings: Optional[DictConfig] = None,
    ):
        self.document = document
        self.environment = environment

        animation = (settings if settings is not None else load_settings()).animation
        self.threshold = float(animation.threshold)
        self.root_margin = str(animation.root_margin)

        self.observer: Optional[IntersectionObserver] = None
        self.installed = False

    def install(self) -> None:
        if self.installed:
            return
        self.installed = True

        if self.environment.prefers_reduced_motion():
            revealed = 0
            for element in self.document.query_all(FADE_IN):
                self.document.add_class(element, VISIBLE_CLASS)
                revealed += 1
            _log_debug(f"Reduced motion: revealed {revealed} elements without animation")
            return

        self.observer = self.environment.create_intersection_observer(
            self._on_entries, root_margin=self.root_margin, threshold=self.threshold
        )
        self.observe_pending()

    def observe_pending(self) -> int:
        """
        Observe tagged elements that are not yet visible (e.g., rendered after install).

        Returns:
            Number of elements newly observed
        """
        if self.observer is None:
            return 0
        added = 0
        for element in self.document.query_all(PENDING):
            if not self.observer.is_observing(element):
                self.observer.observe(element)
                added += 1
        if added:
            _log_debug(f"Observing {added} fade-in elements")
        return added

    def reveal(self, element: Tag) -> None:
        """Mark element visible and stop watching it."""
        self.document.add_class(element, VISIBLE_CLASS)
        if self.observer is not None:
            self.observer.unobserve(element)

    def _on_entries(self, entries: List[IntersectionEntry]) -> None:
        for entry in entries:
            if entry.is_intersecting:
                self.reveal(entry.target)
