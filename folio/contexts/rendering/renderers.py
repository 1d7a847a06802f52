"""
Section Renderers

Maps slices of the portfolio content onto the page document.

Every render_* method follows the same contract:
- resolve the mount point; if it is absent, do nothing
- clear the mount point completely
- append one fragment per record, in input order

Re-rendering the same data therefore gives the same nodes with the same ids.
"""

from typing import Optional, Sequence

from folio.contexts.content.portfolio_data_structure import (
    About,
    Certification,
    Degree,
    Job,
    Project,
)
from folio.contexts.rendering.dom import DomDocument
from folio.contexts.rendering.logger import _log_debug, log_missing_mount
from folio.contexts.rendering.registries import TemplateRegistry
from folio.contexts.rendering.view_models import (
    build_certification_views,
    build_contact_views,
    build_education_views,
    build_experience_views,
    build_hero_view,
    build_hobby_views,
    build_project_views,
)
from folio.utils.timestamp import current_year

# Mount points
EXPERIENCE_MOUNT = "#experience-timeline"
EDUCATION_MOUNT = "#education-grid"
PROJECTS_MOUNT = "#projects-grid"
CERTIFICATIONS_MOUNT = "#certifications-grid"
HOBBIES_MOUNT = "#hobbies-list"
CONTACT_MOUNT = "#contact-methods"
CURRENT_YEAR_MOUNT = "#current-year"

# Hero hooks
HERO_NAME = '[data-testid="text-name"]'
HERO_SURNAME = '[data-testid="text-surname"]'
HERO_TITLE = '[data-testid="text-title"]'
HERO_SUMMARY = '[data-testid="text-summary"]'
FOOTER_NAME = "#footer-name"


class PortfolioRenderer:
    """Renders content sections into a DomDocument using fragment templates."""

    def __init__(self, document: DomDocument, template_registry: Optional[TemplateRegistry] = None):
        self.document = document
        self.template_registry = template_registry or TemplateRegistry()

    def _mount(self, section: str, selector: str):
        mount = self.document.query(selector)
        if mount is None:
            log_missing_mount(section, selector)
            return None
        self.document.clear(mount)
        return mount

    def _append(self, mount, template_name: str, **context) -> None:
        template = self.template_registry.get_template(template_name)
        self.document.append_fragment(mount, template.render(**context))

    def _set_text(self, selector: str, text: str) -> None:
        element = self.document.query(selector)
        if element is not None:
            self.document.set_text(element, text)

    def render_hero(self, about: About, mount_selector: Optional[str] = None) -> None:
        """
        Fill the hero name, title and summary hooks and the footer name.

        The name is split on whitespace: every token but the last goes to the
        first/middle hook, the last token to the surname hook. Each hook is
        optional on its own. `mount_selector` scopes the hero hooks to a
        container when given.
        """
        view = build_hero_view(about)
        scope = ""
        if mount_selector is not None:
            if self.document.query(mount_selector) is None:
                log_missing_mount("hero", mount_selector)
                return
            scope = f"{mount_selector} "

        self._set_text(scope + HERO_NAME, view.first_names)
        self._set_text(scope + HERO_SURNAME, view.surname)
        self._set_text(scope + HERO_TITLE, view.title)
        self._set_text(scope + HERO_SUMMARY, view.summary)
        self._set_text(FOOTER_NAME, view.full_name)

    def render_experience(self, jobs: Sequence[Job], mount_selector: str = EXPERIENCE_MOUNT) -> None:
        """Render the experience timeline, one item per job."""
        mount = self._mount("experience", mount_selector)
        if mount is None:
            return
        for item in build_experience_views(jobs):
            self._append(mount, "experience_item", item=item)
        _log_debug(f"experience: {len(jobs)} items")

    def render_education(
        self, degrees: Sequence[Degree], mount_selector: str = EDUCATION_MOUNT
    ) -> None:
        """Render the education grid, one card per degree."""
        mount = self._mount("education", mount_selector)
        if mount is None:
            return
        for card in build_education_views(degrees):
            self._append(mount, "education_card", card=card)
        _log_debug(f"education: {len(degrees)} cards")

    def render_projects(
        self, projects: Sequence[Project], mount_selector: str = PROJECTS_MOUNT
    ) -> None:
        """Render the projects grid, one card per project."""
        mount = self._mount("projects", mount_selector)
        if mount is None:
            return
        for card in build_project_views(projects):
            self._append(mount, "project_card", card=card)
        _log_debug(f"projects: {len(projects)} cards")

    def render_certifications(
        self, certifications: Sequence[Certification], mount_selector: str = CERTIFICATIONS_MOUNT
    ) -> None:
        """Render the certifications grid, one card per certification."""
        mount = self._mount("certifications", mount_selector)
        if mount is None:
            return
        for card in build_certification_views(certifications):
            self._append(mount, "certification_card", card=card)
        _log_debug(f"certifications: {len(certifications)} cards")

    def render_hobbies(self, hobbies: Sequence[str], mount_selector: str = HOBBIES_MOUNT) -> None:
        """Render the hobbies list inside a single fade-in wrapper."""
        mount = self._mount("hobbies", mount_selector)
        if mount is None:
            return
        self._append(mount, "hobbies_list", hobbies=build_hobby_views(hobbies))
        _log_debug(f"hobbies: {len(hobbies)} items")

    def render_contact_methods(self, about: About, mount_selector: str = CONTACT_MOUNT) -> None:
        """Render the three fixed contact methods (Email, LinkedIn, GitHub)."""
        mount = self._mount("contact", mount_selector)
        if mount is None:
            return
        for method in build_contact_views(about):
            self._append(mount, "contact_method", method=method)

    def render_footer_year(self, year: Optional[int] = None, mount_selector: str = CURRENT_YEAR_MOUNT) -> None:
        """Write the current year (or the given one) into the footer."""
        element = self.document.query(mount_selector)
        if element is None:
            log_missing_mount("footer", mount_selector)
            return
        self.document.set_text(element, str(year if year is not None else current_year()))
