"""Best-effort patching of the project ``config.js``.

When the configuration file is missing it is rendered from the bundled
``config.js.j2`` template. When it exists, only the quoted values of the four
branding fields are replaced; every other character of the file is kept.

Replacement is textual, not a parse of the JavaScript source. A field name
that also appears inside a comment or another string earlier in the file can
be matched instead of the real assignment.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from create_anta_app.exceptions import ConfigPatchError

if TYPE_CHECKING:
    from create_anta_app.scaffolding.details import ProjectDetails

__all__ = (
    "DEFAULT_KEYWORDS",
    "PATCHED_FIELDS",
    "PatchResult",
    "get_template_dir",
    "patch_config",
    "patch_config_text",
    "render_config",
    "to_js_string",
)

logger = logging.getLogger("create_anta_app")

DEFAULT_KEYWORDS = ("nextjs", "react", "tailwindcss")

# config.js field name -> ProjectDetails attribute
PATCHED_FIELDS: dict[str, str] = {
    "siteName": "project_title",
    "siteDescription": "tagline",
    "primaryColor": "primary_color",
    "secondaryColor": "secondary_color",
}

_QUOTED_VALUE = r"""(?P<value>'(?:[^'\\\n]|\\.)*'|"(?:[^"\\\n]|\\.)*")"""
_FIELD_PATTERNS: dict[str, "re.Pattern[str]"] = {
    name: re.compile(rf"(?P<prefix>\b{name}\s*:\s*){_QUOTED_VALUE}") for name in PATCHED_FIELDS
}
_JS_ESCAPES = {"\\": "\\\\", "'": "\\'", "\n": "\\n", "\r": "\\r"}


def _list_factory() -> list[str]:
    return []


@dataclass
class PatchResult:
    """Outcome of a :func:`patch_config` call.

    Attributes:
        path: The configuration file that was written.
        created: True when the file did not exist and was rendered from the template.
        updated_fields: Fields whose assignment was found and rewritten.
        missing_fields: Fields left untouched because no assignment was found.
    """

    path: Path
    created: bool
    updated_fields: list[str] = field(default_factory=_list_factory)
    missing_fields: list[str] = field(default_factory=_list_factory)


def to_js_string(value: str) -> str:
    """Quote ``value`` as a single-quoted JavaScript string literal."""
    return "'" + "".join(_JS_ESCAPES.get(char, char) for char in value) + "'"


def _replace_value(literal: str) -> "Callable[[re.Match[str]], str]":
    def replace(match: "re.Match[str]") -> str:
        return match.group("prefix") + literal

    return replace


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF line endings byte-identical through the rewrite
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(content)


def get_template_dir() -> Path:
    """Get the directory containing the configuration template.

    Returns:
        Path to the templates directory.
    """
    return Path(__file__).parent / "templates"


def render_config(details: "ProjectDetails", keywords: "tuple[str, ...]" = DEFAULT_KEYWORDS) -> str:
    """Render a complete ``config.js`` for ``details``.

    Templates are rendered with autoescaping disabled because the output is
    JavaScript, not HTML; values are quoted by the ``js_string`` filter.

    Args:
        details: Branding values to substitute.
        keywords: SEO keywords for the ``seo.keywords`` list.

    Returns:
        Rendered configuration source.
    """
    from jinja2 import Environment, FileSystemLoader

    env = Environment(
        loader=FileSystemLoader(str(get_template_dir())),
        keep_trailing_newline=True,
        autoescape=False,  # noqa: S701
    )
    env.filters["js_string"] = to_js_string
    template = env.get_template("config.js.j2")
    return template.render(
        project_title=details.project_title,
        tagline=details.tagline,
        primary_color=details.primary_color,
        secondary_color=details.secondary_color,
        keywords=keywords,
    )


def patch_config_text(content: str, details: "ProjectDetails") -> tuple[str, list[str], list[str]]:
    """Replace the values of the known fields inside ``content``.

    Only the first assignment of each field is rewritten. Values are always
    written single-quoted, whatever quote style the file used before.

    Args:
        content: Existing configuration source.
        details: Branding values to substitute.

    Returns:
        The patched source, the fields that were updated and the fields that were not found.
    """
    updated: list[str] = []
    missing: list[str] = []

    for name, attribute in PATCHED_FIELDS.items():
        literal = to_js_string(getattr(details, attribute))
        content, count = _FIELD_PATTERNS[name].subn(_replace_value(literal), content, count=1)
        if count:
            updated.append(name)
        else:
            missing.append(name)

    return content, updated, missing


def patch_config(target_path: "Path | str", details: "ProjectDetails") -> PatchResult:
    """Create or patch the configuration file at ``target_path``.

    Args:
        target_path: Location of ``config.js`` inside the project.
        details: Branding values to write.

    Raises:
        ConfigPatchError: If the file cannot be read or written.

    Returns:
        What was written and which fields were found.
    """
    path = Path(target_path)

    if not path.exists():
        try:
            _write_text(path, render_config(details))
        except OSError as e:
            raise ConfigPatchError(str(path), e) from e
        logger.debug("Created %s from template", path)
        return PatchResult(path=path, created=True, updated_fields=list(PATCHED_FIELDS))

    try:
        content = _read_text(path)
        patched, updated, missing = patch_config_text(content, details)
        _write_text(path, patched)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigPatchError(str(path), e) from e

    if missing:
        logger.debug("No assignment found in %s for: %s", path, ", ".join(missing))
    return PatchResult(path=path, created=False, updated_fields=updated, missing_fields=missing)
