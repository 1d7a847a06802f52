"""
Icon Resolver

Maps a free-text project or certification name to one of a small fixed set of
icons by case-insensitive keyword matching. Rules are checked in order and the
first rule with a matching keyword wins; no match gives IconKind.DEFAULT.

Examples:
    >>> resolve_project_icon("Test Automation Suite")
    <IconKind.TEST: 'test'>
    >>> resolve_certification_icon("Microsoft Azure Fundamentals")
    <IconKind.CLOUD: 'cloud'>
"""

from enum import Enum
from typing import Dict, Optional, Sequence, Tuple


class IconKind(str, Enum):
    """Icon identifiers (compare equal to their string values)."""

    TEST = "test"
    INFRASTRUCTURE = "infrastructure"
    SECURITY = "security"
    CLOUD = "cloud"
    LOCK = "lock"
    DATABASE = "database"
    SERVER = "server"
    DEFAULT = "default"


IconRules = Sequence[Tuple[Tuple[str, ...], IconKind]]

# Order matters: "Security Test Plan" is a test project, not a security one
PROJECT_ICON_RULES: IconRules = (
    (("test", "automation"), IconKind.TEST),
    (("infrastructure", "terraform", "docker"), IconKind.INFRASTRUCTURE),
    (("security", "soc", "compliance"), IconKind.SECURITY),
)

CERTIFICATION_ICON_RULES: IconRules = (
    (("security", "cybersecurity"), IconKind.SECURITY),
    (("azure", "cloud"), IconKind.CLOUD),
    (("isc2", "fortinet"), IconKind.LOCK),
    (("sql", "database"), IconKind.DATABASE),
    (("deploy", "configure"), IconKind.SERVER),
)

# SVG path data (24x24 outline icons)
CHECK_CIRCLE_PATH = "M9 12l2 2 4-4m6 2a9 9 0 11-18 0 9 9 0 0118 0z"
STACK_PATH = (
    "M19 11H5m14 0a2 2 0 012 2v6a2 2 0 01-2 2H5a2 2 0 01-2-2v-6a2 2 0 012-2m14 0V9"
    "a2 2 0 00-2-2M5 11V9a2 2 0 012-2m0 0V5a2 2 0 012-2h6a2 2 0 012 2v2M7 7h10"
)
SHIELD_PATH = (
    "M9 12l2 2 4-4m5.618-4.016A11.955 11.955 0 0112 2.944a11.955 11.955 0 01-8.618 3.04"
    "A12.02 12.02 0 003 9c0 5.591 3.824 10.29 9 11.622 5.176-1.332 9-6.03 9-11.622 "
    "0-1.042-.133-2.052-.382-3.016z"
)
CODE_PATH = "M10 20l4-16m4 4l4 4-4 4M6 16l-4-4 4-4"
CLOUD_PATH = (
    "M3 15a4 4 0 004 4h9a5 5 0 10-.1-9.999 5.002 5.002 0 10-9.78 2.096A4.001 4.001 0 003 15z"
)
LOCK_PATH = (
    "M12 15v2m-6 4h12a2 2 0 002-2v-6a2 2 0 00-2-2H6a2 2 0 00-2 2v6a2 2 0 002 2z"
    "m10-10V7a4 4 0 00-8 0v4h8z"
)
DATABASE_PATH = (
    "M4 7v10c0 2.21 3.582 4 8 4s8-1.79 8-4V7M4 7c0 2.21 3.582 4 8 4s8-1.79 8-4"
    "M4 7c0-2.21 3.582-4 8-4s8 1.79 8 4"
)

PROJECT_ICON_PATHS: Dict[IconKind, str] = {
    IconKind.TEST: CHECK_CIRCLE_PATH,
    IconKind.INFRASTRUCTURE: STACK_PATH,
    IconKind.SECURITY: SHIELD_PATH,
    IconKind.DEFAULT: CODE_PATH,
}

CERTIFICATION_ICON_PATHS: Dict[IconKind, str] = {
    IconKind.SECURITY: SHIELD_PATH,
    IconKind.CLOUD: CLOUD_PATH,
    IconKind.LOCK: LOCK_PATH,
    IconKind.DATABASE: DATABASE_PATH,
    IconKind.SERVER: STACK_PATH,
    IconKind.DEFAULT: SHIELD_PATH,
}


def _resolve_icon(name: Optional[str], rules: IconRules) -> IconKind:
    lower_name = (name or "").lower()
    for keywords, kind in rules:
        if any(keyword in lower_name for keyword in keywords):
            return kind
    return IconKind.DEFAULT


def resolve_project_icon(name: Optional[str]) -> IconKind:
    """Icon for a project name."""
    return _resolve_icon(name, PROJECT_ICON_RULES)


def resolve_certification_icon(name: Optional[str]) -> IconKind:
    """Icon for a certification name."""
    return _resolve_icon(name, CERTIFICATION_ICON_RULES)


def project_icon_path(kind: IconKind) -> str:
    """SVG path data for a project icon."""
    return PROJECT_ICON_PATHS.get(kind, PROJECT_ICON_PATHS[IconKind.DEFAULT])


def certification_icon_path(kind: IconKind) -> str:
    """SVG path data for a certification icon."""
    return CERTIFICATION_ICON_PATHS.get(kind, CERTIFICATION_ICON_PATHS[IconKind.DEFAULT])
