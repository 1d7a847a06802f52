"""
Fallback content document.

Used by the content loader whenever the real document cannot be loaded, so the
page never renders empty. Person fields are fixed; every list is empty.
"""

import copy
from typing import Any, Dict

from folio.contexts.content.portfolio_data_structure import PortfolioContent

FALLBACK_DOCUMENT: Dict[str, Any] = {
    "about": {
        "name": "Jubin Raj Nirmal",
        "title": "Software Engineer & QA Developer",
        "summary": (
            "Detail-oriented software engineer with a Master's in Information Security, "
            "specializing in Quality Assurance and Testing."
        ),
        "location": "Canada",
        "email": "contact@jubinrajnirmal.com",
        "links": {
            "github": "https://github.com/jubinrajnirmal",
            "linkedin": "https://linkedin.com/in/jubinrajnirmal",
        },
    },
    "experience": [],
    "education": [],
    "projects": [],
    "certifications": [],
    "hobbies": [],
}


def get_fallback_document() -> Dict[str, Any]:
    """Fresh copy of the fallback JSON document."""
    return copy.deepcopy(FALLBACK_DOCUMENT)


def get_fallback_content() -> PortfolioContent:
    """Fallback document as typed content."""
    return PortfolioContent.from_dict(get_fallback_document())
