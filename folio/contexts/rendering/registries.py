"""
Template Registry

Loads and caches the Jinja2 fragment templates used by the section renderers.
"""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("FOLIO_TEMPLATES_PATH", Path(__file__).resolve().parent / "templates")
)
TEMPLATE_SUFFIX = ".html.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for section fragments.

    Templates are stored as templates/{name}.html.jinja. Autoescaping is always
    on: every content value is plain text in the rendered fragment, never markup.
    """

    def __init__(self, templates_path: Optional[Path] = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the templates. Defaults to
                           FOLIO_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without suffix (e.g., 'project_card')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}{TEMPLATE_SUFFIX}"

        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.templates_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

