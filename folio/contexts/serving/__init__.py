"""
Serving Context

Responsibilities:
- Serves the page shell, the content document and static assets over HTTP

Owns: URL layout of the site (/, /src/, /assets/)
Never: Renders content server-side
"""

from folio.contexts.serving.server import create_app

__all__ = ["create_app"]
