"""
Content Context

Responsibilities:
- Fetches the portfolio content document (file or URL)
- Builds the typed, read-only content model
- Substitutes the fixed fallback document when loading fails

Owns: Content document format, fallback document
Never: Touches the page document
"""

from folio.contexts.content.defaults import (
    FALLBACK_DOCUMENT,
    get_fallback_content,
    get_fallback_document,
)
from folio.contexts.content.exceptions import ContentLoadError, InvalidContentError
from folio.contexts.content.loader import ContentLoader
from folio.contexts.content.portfolio_data_structure import (
    About,
    Certification,
    Degree,
    Job,
    Links,
    PortfolioContent,
    Project,
    ProjectLinks,
)

__all__ = [
    # Loading
    "ContentLoader",
    "ContentLoadError",
    "InvalidContentError",
    # Fallback
    "FALLBACK_DOCUMENT",
    "get_fallback_content",
    "get_fallback_document",
    # Data structure classes
    "About",
    "Certification",
    "Degree",
    "Job",
    "Links",
    "PortfolioContent",
    "Project",
    "ProjectLinks",
]
