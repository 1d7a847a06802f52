"""
View Models

Pure functions from content to render instructions. Every decision a section
template needs (ids, variants, accent flags, icons, display strings) is made
here, so templates only format and these functions can be tested without a
document.

Element ids embed list positions: "{field}-{index}" for records and
"{field}-{index}-{subindex}" for nested lists (highlights, badges, coursework).
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from folio.contexts.content.portfolio_data_structure import (
    About,
    Certification,
    Degree,
    Job,
    Project,
)
from folio.contexts.rendering.icons import (
    CODE_PATH,
    IconKind,
    certification_icon_path,
    project_icon_path,
    resolve_certification_icon,
    resolve_project_icon,
)

PRIMARY = "primary"
SECONDARY = "secondary"
PERIOD_SEPARATOR = " – "
DISPLAY_URL_PREFIX = "https://"


def variant_for(index: int) -> str:
    """Alternating visual variant, starting with primary at index 0."""
    return PRIMARY if index % 2 == 0 else SECONDARY


def split_name(full_name: str) -> Tuple[str, str]:
    """
    Split a full name into (first/middle, surname) on whitespace.

    The last token is the surname; every earlier token is first/middle.
    No locale rules are applied.

    Examples:
        >>> split_name("Jubin Raj Nirmal")
        ('Jubin Raj', 'Nirmal')
        >>> split_name("Cher")
        ('', 'Cher')
    """
    tokens = full_name.split()
    if not tokens:
        return "", ""
    return " ".join(tokens[:-1]), tokens[-1]


def format_period(start: str, end: str) -> str:
    """Join period bounds with an en dash, leaving out absent bounds."""
    return PERIOD_SEPARATOR.join(part for part in (start, end) if part)


def display_url(url: Optional[str]) -> str:
    """URL as displayed: a literal leading "https://" is dropped."""
    if not url:
        return ""
    if url.startswith(DISPLAY_URL_PREFIX):
        return url[len(DISPLAY_URL_PREFIX):]
    return url


@dataclass(frozen=True)
class TextItemView:
    """One text line with its element id (highlight, coursework line, hobby)."""

    test_id: str
    text: str


@dataclass(frozen=True)
class BadgeView:
    """One technology badge."""

    test_id: str
    label: str
    variant: str


@dataclass(frozen=True)
class HeroView:
    full_name: str
    first_names: str
    surname: str
    title: str
    summary: str


@dataclass(frozen=True)
class ExperienceItemView:
    index: int
    variant: str
    role: str
    company: str
    period: str
    highlights: Tuple[TextItemView, ...]
    badges: Tuple[BadgeView, ...]


@dataclass(frozen=True)
class EducationCardView:
    index: int
    variant: str
    is_masters: bool
    degree: str
    field: str
    school: str
    period: str
    coursework: Tuple[TextItemView, ...]


@dataclass(frozen=True)
class ProjectCardView:
    index: int
    variant: str
    icon: IconKind
    icon_path: str
    name: str
    description: str
    badges: Tuple[BadgeView, ...]
    github_url: Optional[str]
    demo_url: Optional[str]


@dataclass(frozen=True)
class CertificationCardView:
    index: int
    variant: str
    icon: IconKind
    icon_path: str
    name: str
    issuer: str
    year: str
    year_accent: bool


@dataclass(frozen=True)
class ContactMethodView:
    title: str
    slug: str
    value: str
    icon_path: str
    variant: str


MAIL_PATH = (
    "M3 8l7.89 4.26a2 2 0 002.22 0L21 8M5 19h14a2 2 0 002-2V7a2 2 0 00-2-2H5"
    "a2 2 0 00-2 2v10a2 2 0 002 2z"
)
BRIEFCASE_PATH = (
    "M21 13.255A23.931 23.931 0 0112 15c-3.183 0-6.22-.62-9-1.745M16 6V4a2 2 0 00-2-2h-4"
    "a2 2 0 00-2-2v2m8 0V6a2 2 0 012 2v6M8 8v10a2 2 0 002 2h4a2 2 0 002-2V8"
)


def _badges(prefix: str, index: int, labels: Sequence[str], variant: str) -> Tuple[BadgeView, ...]:
    return tuple(
        BadgeView(test_id=f"{prefix}-{index}-{i}", label=label, variant=variant)
        for i, label in enumerate(labels)
    )


def _text_items(prefix: str, index: int, lines: Sequence[str]) -> Tuple[TextItemView, ...]:
    return tuple(
        TextItemView(test_id=f"{prefix}-{index}-{i}", text=line) for i, line in enumerate(lines)
    )


def build_hero_view(about: About) -> HeroView:
    first_names, surname = split_name(about.name)
    return HeroView(
        full_name=about.name,
        first_names=first_names,
        surname=surname,
        title=about.title,
        summary=about.summary,
    )


def build_experience_views(jobs: Sequence[Job]) -> Tuple[ExperienceItemView, ...]:
    views = []
    for index, job in enumerate(jobs):
        variant = variant_for(index)
        views.append(
            ExperienceItemView(
                index=index,
                variant=variant,
                role=job.role,
                company=job.company,
                period=format_period(job.start, job.end),
                highlights=_text_items("text-highlight", index, job.highlights),
                badges=_badges("badge", index, job.stack, variant),
            )
        )
    return tuple(views)


def build_education_views(degrees: Sequence[Degree]) -> Tuple[EducationCardView, ...]:
    """Education cards; degrees naming a master's get the accent style."""
    return tuple(
        EducationCardView(
            index=index,
            variant=variant_for(index),
            is_masters="master" in degree.degree.lower(),
            degree=degree.degree,
            field=degree.field or "",
            school=degree.school,
            period=format_period(degree.start, degree.end),
            coursework=_text_items("text-coursework", index, degree.notes),
        )
        for index, degree in enumerate(degrees)
    )


def build_project_views(projects: Sequence[Project]) -> Tuple[ProjectCardView, ...]:
    views = []
    for index, project in enumerate(projects):
        variant = variant_for(index)
        icon = resolve_project_icon(project.name)
        views.append(
            ProjectCardView(
                index=index,
                variant=variant,
                icon=icon,
                icon_path=project_icon_path(icon),
                name=project.name,
                description=project.description,
                badges=_badges("badge-project", index, project.stack, variant),
                github_url=project.links.github,
                demo_url=project.links.demo,
            )
        )
    return tuple(views)


def build_certification_views(
    certifications: Sequence[Certification],
) -> Tuple[CertificationCardView, ...]:
    views = []
    for index, certification in enumerate(certifications):
        variant = variant_for(index)
        icon = resolve_certification_icon(certification.name)
        views.append(
            CertificationCardView(
                index=index,
                variant=variant,
                icon=icon,
                icon_path=certification_icon_path(icon),
                name=certification.name,
                issuer=certification.issuer,
                year=certification.year,
                year_accent=variant == PRIMARY,
            )
        )
    return tuple(views)


def build_hobby_views(hobbies: Sequence[str]) -> Tuple[TextItemView, ...]:
    return tuple(
        TextItemView(test_id=f"text-hobby-{index}", text=hobby) for index, hobby in enumerate(hobbies)
    )


def build_contact_views(about: About) -> Tuple[ContactMethodView, ...]:
    """
    Contact methods: always Email, LinkedIn, GitHub, in that order.

    Email is shown as-is; profile URLs are shown without their https:// prefix.
    """
    return (
        ContactMethodView(
            title="Email", slug="email", value=about.email, icon_path=MAIL_PATH, variant=PRIMARY
        ),
        ContactMethodView(
            title="LinkedIn",
            slug="linkedin",
            value=display_url(about.links.linkedin),
            icon_path=BRIEFCASE_PATH,
            variant=SECONDARY,
        ),
        ContactMethodView(
            title="GitHub",
            slug="github",
            value=display_url(about.links.github),
            icon_path=CODE_PATH,
            variant=PRIMARY,
        ),
    )
