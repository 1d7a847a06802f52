"""
Portfolio Content Data Structures

Defines the typed, read-only model of the portfolio content document:

    about            -> About (with Links)
    experience[]     -> Job
    education[]      -> Degree
    projects[]       -> Project (with ProjectLinks)
    certifications[] -> Certification
    hobbies[]        -> str

All classes are frozen and store lists as tuples, so content cannot be changed
after load. List order is presentation order.

Any field may be absent from the JSON document: missing text becomes "",
missing optional values become None and missing lists become empty tuples.
Scalars are coerced to text (a numeric certification year renders as "2023").
A record of the wrong shape (a job given as a string) raises InvalidContentError.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

from folio.contexts.content.exceptions import InvalidContentError


def _text(value: Any) -> str:
    """Coerce a scalar to display text; None becomes ""."""
    if value is None:
        return ""
    return str(value)


def _optional_text(value: Any) -> Optional[str]:
    """Coerce a scalar to text, keeping absence (None or "") as None."""
    if value is None or value == "":
        return None
    return str(value)


def _text_list(value: Any, field_name: str) -> Tuple[str, ...]:
    """Coerce a JSON list of scalars to a tuple of text."""
    if value is None:
        return ()
    if not isinstance(value, list):
        raise InvalidContentError(
            f"Field '{field_name}' must be a list, got {type(value).__name__}"
        )
    return tuple(_text(item) for item in value)


def _record(value: Any, record_name: str) -> Dict[str, Any]:
    """Return a JSON object as a dict; None counts as an empty record."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidContentError(
            f"Record '{record_name}' must be an object, got {type(value).__name__}"
        )
    return value


def _records(value: Any, field_name: str) -> Tuple[Dict[str, Any], ...]:
    """Return a JSON list of objects as a tuple of dicts."""
    if value is None:
        return ()
    if not isinstance(value, list):
        raise InvalidContentError(
            f"Field '{field_name}' must be a list, got {type(value).__name__}"
        )
    return tuple(_record(item, f"{field_name}[{index}]") for index, item in enumerate(value))


@dataclass(frozen=True)
class Links:
    """
    Profile links from the about block.

    Attributes:
        github: GitHub profile URL (None if absent)
        linkedin: LinkedIn profile URL (None if absent)
    """

    github: Optional[str] = None
    linkedin: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Links":
        data = _record(data, "about.links")
        return cls(
            github=_optional_text(data.get("github")),
            linkedin=_optional_text(data.get("linkedin")),
        )


@dataclass(frozen=True)
class About:
    """
    Person-level content shown in the hero, footer and contact sections.

    Attributes:
        name: Full name (split into first/middle and surname by the hero)
        title: Professional title
        summary: Short profile paragraph
        location: Free-form location
        email: Contact email, shown as-is
        links: GitHub and LinkedIn URLs
    """

    name: str = ""
    title: str = ""
    summary: str = ""
    location: str = ""
    email: str = ""
    links: Links = field(default_factory=Links)

    @classmethod
    def from_dict(cls, data: Any) -> "About":
        data = _record(data, "about")
        return cls(
            name=_text(data.get("name")),
            title=_text(data.get("title")),
            summary=_text(data.get("summary")),
            location=_text(data.get("location")),
            email=_text(data.get("email")),
            links=Links.from_dict(data.get("links")),
        )


@dataclass(frozen=True)
class Job:
    """
    Work experience entry.

    Attributes:
        role: Job title
        company: Employer
        start: Start of the period (free-form, never parsed as a date)
        end: End of the period (free-form, e.g. "Present")
        highlights: Ordered achievement bullets
        stack: Ordered technology names
    """

    role: str = ""
    company: str = ""
    start: str = ""
    end: str = ""
    highlights: Tuple[str, ...] = ()
    stack: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Job":
        return cls(
            role=_text(data.get("role")),
            company=_text(data.get("company")),
            start=_text(data.get("start")),
            end=_text(data.get("end")),
            highlights=_text_list(data.get("highlights"), "highlights"),
            stack=_text_list(data.get("stack"), "stack"),
        )


@dataclass(frozen=True)
class Degree:
    """
    Education entry.

    Attributes:
        degree: Degree name (e.g., "Master of Science")
        field: Field of study (None if absent)
        school: Institution
        start: Start of the period (free-form)
        end: End of the period (free-form)
        notes: Ordered coursework lines (empty if absent)
    """

    degree: str = ""
    field: Optional[str] = None
    school: str = ""
    start: str = ""
    end: str = ""
    notes: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Degree":
        return cls(
            degree=_text(data.get("degree")),
            field=_optional_text(data.get("field")),
            school=_text(data.get("school")),
            start=_text(data.get("start")),
            end=_text(data.get("end")),
            notes=_text_list(data.get("notes"), "notes"),
        )


@dataclass(frozen=True)
class ProjectLinks:
    """Optional project links."""

    github: Optional[str] = None
    demo: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ProjectLinks":
        data = _record(data, "project.links")
        return cls(
            github=_optional_text(data.get("github")),
            demo=_optional_text(data.get("demo")),
        )


@dataclass(frozen=True)
class Project:
    """
    Project entry.

    Attributes:
        name: Project name (also drives icon selection)
        description: One-paragraph description
        stack: Ordered technology names
        links: Optional code/demo links
    """

    name: str = ""
    description: str = ""
    stack: Tuple[str, ...] = ()
    links: ProjectLinks = field(default_factory=ProjectLinks)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        return cls(
            name=_text(data.get("name")),
            description=_text(data.get("description")),
            stack=_text_list(data.get("stack"), "stack"),
            links=ProjectLinks.from_dict(data.get("links")),
        )


@dataclass(frozen=True)
class Certification:
    """Certification entry (name also drives icon selection)."""

    name: str = ""
    issuer: str = ""
    year: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Certification":
        return cls(
            name=_text(data.get("name")),
            issuer=_text(data.get("issuer")),
            year=_text(data.get("year")),
        )


@dataclass(frozen=True)
class PortfolioContent:
    """
    Root content document.

    This is the shared interface between the content loader and the renderers.
    Renderers only read it.
    """

    about: About = field(default_factory=About)
    experience: Tuple[Job, ...] = ()
    education: Tuple[Degree, ...] = ()
    projects: Tuple[Project, ...] = ()
    certifications: Tuple[Certification, ...] = ()
    hobbies: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "PortfolioContent":
        """
        Build content from a parsed JSON document.

        Args:
            data: Parsed JSON root (must be an object)

        Returns:
            PortfolioContent instance

        Raises:
            InvalidContentError: If the root or any record has the wrong shape
        """
        data = _record(data, "document")
        return cls(
            about=About.from_dict(data.get("about")),
            experience=tuple(
                Job.from_dict(item) for item in _records(data.get("experience"), "experience")
            ),
            education=tuple(
                Degree.from_dict(item) for item in _records(data.get("education"), "education")
            ),
            projects=tuple(
                Project.from_dict(item) for item in _records(data.get("projects"), "projects")
            ),
            certifications=tuple(
                Certification.from_dict(item)
                for item in _records(data.get("certifications"), "certifications")
            ),
            hobbies=_text_list(data.get("hobbies"), "hobbies"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON-compatible document (tuples become lists)."""
        return _listify(asdict(self))


def _listify(value: Any) -> Any:
    """Recursively turn tuples into lists for JSON output."""
    if isinstance(value, dict):
        return {key: _listify(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_listify(item) for item in value]
    return value
