"""Project branding details collected before the configuration is written."""

import re
from dataclasses import dataclass

__all__ = (
    "DEFAULT_PRIMARY_COLOR",
    "DEFAULT_PROJECT_NAME",
    "DEFAULT_PROJECT_TITLE",
    "DEFAULT_SECONDARY_COLOR",
    "DEFAULT_TAGLINE",
    "ProjectDetails",
    "validate_hex_color",
    "validate_non_empty",
    "validate_project_name",
)

DEFAULT_PROJECT_NAME = "my-anta-app"
DEFAULT_PROJECT_TITLE = "My Anta App"
DEFAULT_TAGLINE = "Built with Anta"
DEFAULT_PRIMARY_COLOR = "#3B82F6"
DEFAULT_SECONDARY_COLOR = "#1E40AF"

_PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
_HEX_COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")


def validate_project_name(value: str) -> str:
    """Trim and validate a project directory name.

    Raises:
        ValueError: If the name is empty or contains unsupported characters.

    Returns:
        The trimmed name.
    """
    name = value.strip()
    if not name:
        msg = "Project name cannot be empty"
        raise ValueError(msg)
    if not _PROJECT_NAME_PATTERN.match(name):
        msg = "Project name can only contain letters, numbers, hyphens, and underscores"
        raise ValueError(msg)
    return name


def validate_non_empty(value: str, label: str) -> str:
    """Trim ``value`` and reject it when nothing is left.

    Raises:
        ValueError: If the trimmed value is empty.

    Returns:
        The trimmed value.
    """
    stripped = value.strip()
    if not stripped:
        msg = f"{label} cannot be empty"
        raise ValueError(msg)
    return stripped


def validate_hex_color(value: str, example: str = DEFAULT_PRIMARY_COLOR) -> str:
    """Trim and validate a ``#RGB`` or ``#RRGGBB`` color.

    Raises:
        ValueError: If the value is not a hex color code.

    Returns:
        The trimmed color.
    """
    color = value.strip()
    if not _HEX_COLOR_PATTERN.match(color):
        msg = f"Please enter a valid hex color code (e.g., {example})"
        raise ValueError(msg)
    return color


@dataclass(frozen=True)
class ProjectDetails:
    """Branding values written into the project configuration.

    Attributes:
        project_title: Site name, also used as the SEO title.
        tagline: Site description, also used as the SEO description.
        primary_color: Primary brand color as a hex code.
        secondary_color: Secondary brand color as a hex code.
    """

    project_title: str = DEFAULT_PROJECT_TITLE
    tagline: str = DEFAULT_TAGLINE
    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR

    @classmethod
    def create(
        cls,
        project_title: str = DEFAULT_PROJECT_TITLE,
        tagline: str = DEFAULT_TAGLINE,
        primary_color: str = DEFAULT_PRIMARY_COLOR,
        secondary_color: str = DEFAULT_SECONDARY_COLOR,
    ) -> "ProjectDetails":
        """Build validated details from raw user input.

        Raises:
            ValueError: If any value is invalid.

        Returns:
            Details with every value trimmed.
        """
        return cls(
            project_title=validate_non_empty(project_title, "Project title"),
            tagline=validate_non_empty(tagline, "Tagline"),
            primary_color=validate_hex_color(primary_color, DEFAULT_PRIMARY_COLOR),
            secondary_color=validate_hex_color(secondary_color, DEFAULT_SECONDARY_COLOR),
        )

    def as_fields(self) -> dict[str, str]:
        """Return the values keyed by their configuration field names."""
        return {
            "projectTitle": self.project_title,
            "tagline": self.tagline,
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
        }
