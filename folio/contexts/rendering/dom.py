"""
DOM Adapter

Thin wrapper over a BeautifulSoup document exposing the handful of DOM
operations the renderers and the navigation layer need: query by selector,
clear and fill a mount point, set plain text, toggle classes and attributes.

Text set through set_text() is stored as a text node and escaped on output,
so content is never reinterpreted as markup.
"""

from pathlib import Path
from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger
from soupsieve import SelectorSyntaxError

PARSER = "html.parser"


class DomDocument:
    """Mutable HTML document for one page lifetime."""

    def __init__(self, markup: str):
        self.soup = BeautifulSoup(markup, PARSER)

    @classmethod
    def from_file(cls, path: Path) -> "DomDocument":
        """Parse a page shell from disk."""
        return cls(Path(path).read_text(encoding="utf-8"))

    # Queries

    def query(self, selector: str, parent: Optional[Tag] = None) -> Optional[Tag]:
        """First element matching selector, or None (also for malformed selectors)."""
        root = parent if parent is not None else self.soup
        try:
            return root.select_one(selector)
        except SelectorSyntaxError as e:
            logger.warning(f"Error querying selector \"{selector}\": {e}")
            return None

    def query_all(self, selector: str, parent: Optional[Tag] = None) -> List[Tag]:
        """All elements matching selector in document order."""
        root = parent if parent is not None else self.soup
        try:
            return list(root.select(selector))
        except SelectorSyntaxError as e:
            logger.warning(f"Error querying selector \"{selector}\": {e}")
            return []

    def by_id(self, element_id: str) -> Optional[Tag]:
        """Element with the given id attribute (no selector parsing involved)."""
        if not element_id:
            return None
        return self.soup.find(id=element_id)

    def by_test_id(self, test_id: str) -> Optional[Tag]:
        """Element with the given data-testid attribute."""
        return self.soup.find(attrs={"data-testid": test_id})

    @staticmethod
    def contains(ancestor: Tag, node: Optional[Tag]) -> bool:
        """True if node is ancestor or lies inside it."""
        if node is None:
            return False
        if node is ancestor:
            return True
        return any(parent is ancestor for parent in node.parents)

    # Mutations

    @staticmethod
    def clear(element: Tag) -> None:
        """Remove every child of element."""
        element.clear()

    def append_fragment(self, element: Tag, markup: str) -> List[Tag]:
        """
        Parse markup and append its top-level nodes to element.

        Returns:
            The appended top-level elements (text nodes are appended but not returned)
        """
        fragment = BeautifulSoup(markup, PARSER)
        appended = []
        for node in list(fragment.contents):
            node = node.extract()
            element.append(node)
            if isinstance(node, Tag):
                appended.append(node)
        return appended

    @staticmethod
    def set_text(element: Tag, text: str) -> None:
        """Replace element content with a single plain-text node."""
        element.string = text

    @staticmethod
    def has_class(element: Tag, class_name: str) -> bool:
        return class_name in (element.get("class") or [])

    @staticmethod
    def add_class(element: Tag, class_name: str) -> None:
        classes = list(element.get("class") or [])
        if class_name not in classes:
            classes.append(class_name)
            element["class"] = classes

    @staticmethod
    def remove_class(element: Tag, class_name: str) -> None:
        classes = [c for c in (element.get("class") or []) if c != class_name]
        if classes:
            element["class"] = classes
        elif element.has_attr("class"):
            del element["class"]

    def toggle_class(self, element: Tag, class_name: str, enabled: bool) -> None:
        if enabled:
            self.add_class(element, class_name)
        else:
            self.remove_class(element, class_name)

    @staticmethod
    def set_attribute(element: Tag, name: str, value: str) -> None:
        element[name] = value

    # Output

    def to_html(self) -> str:
        return str(self.soup)
