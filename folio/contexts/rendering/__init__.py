"""
Rendering Context

Responsibilities:
- Resolves project and certification icons from free-text names
- Builds pure view models from content (ids, variants, accents, display strings)
- Formats view models with Jinja2 fragment templates
- Mutates the page document through the DOM adapter

Owns: Fragment templates, element id scheme, DOM adapter
Never: Loads content or tracks navigation state
"""

from folio.contexts.rendering.dom import DomDocument
from folio.contexts.rendering.exceptions import RenderError
from folio.contexts.rendering.icons import (
    IconKind,
    resolve_certification_icon,
    resolve_project_icon,
)
from folio.contexts.rendering.registries import TemplateRegistry
from folio.contexts.rendering.renderers import PortfolioRenderer
from folio.contexts.rendering.view_models import split_name

__all__ = [
    # Document and rendering
    "DomDocument",
    "PortfolioRenderer",
    "TemplateRegistry",
    "RenderError",
    # Pure helpers
    "IconKind",
    "resolve_project_icon",
    "resolve_certification_icon",
    "split_name",
]
