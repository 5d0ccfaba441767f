"""Interactive collection of the project name and branding details."""

from collections.abc import Callable

from rich.prompt import Prompt

from create_anta_app.scaffolding.details import (
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_PROJECT_NAME,
    DEFAULT_PROJECT_TITLE,
    DEFAULT_SECONDARY_COLOR,
    DEFAULT_TAGLINE,
    ProjectDetails,
    validate_hex_color,
    validate_non_empty,
    validate_project_name,
)
from create_anta_app.utils import console

__all__ = ("ask_project_details", "ask_project_name", "ask_validated")


def ask_validated(question: str, default: str, validate: "Callable[[str], str]") -> str:
    """Prompt until ``validate`` accepts the answer.

    Args:
        question: Prompt text.
        default: Value used when the user just presses enter.
        validate: Callable returning the normalized value or raising ValueError.

    Returns:
        The validated answer.
    """
    while True:
        answer = Prompt.ask(question, default=default, console=console)
        try:
            return validate(answer)
        except ValueError as e:
            console.print(f"[red]{e}[/]")


def ask_project_name(provided: "str | None" = None, no_prompt: bool = False) -> str:
    """Resolve the project directory name.

    A name given on the command line is validated but never re-asked.

    Raises:
        ValueError: If ``provided`` is not a valid project name.

    Returns:
        The project name.
    """
    if provided:
        return validate_project_name(provided)
    if no_prompt:
        return DEFAULT_PROJECT_NAME
    return ask_validated("What is your project name?", DEFAULT_PROJECT_NAME, validate_project_name)


def ask_project_details(no_prompt: bool = False) -> ProjectDetails:
    """Collect the branding details written into ``config.js``."""
    if no_prompt:
        return ProjectDetails()

    console.print("\n[blue]📝 Let's customize your project:[/]\n")
    project_title = ask_validated(
        "What is your project title?",
        DEFAULT_PROJECT_TITLE,
        lambda value: validate_non_empty(value, "Project title"),
    )
    tagline = ask_validated(
        "What is your project tagline?",
        DEFAULT_TAGLINE,
        lambda value: validate_non_empty(value, "Tagline"),
    )
    primary_color = ask_validated(
        "What is your primary brand color? (hex code)",
        DEFAULT_PRIMARY_COLOR,
        lambda value: validate_hex_color(value, DEFAULT_PRIMARY_COLOR),
    )
    secondary_color = ask_validated(
        "What is your secondary brand color? (hex code)",
        DEFAULT_SECONDARY_COLOR,
        lambda value: validate_hex_color(value, DEFAULT_SECONDARY_COLOR),
    )
    return ProjectDetails.create(
        project_title=project_title,
        tagline=tagline,
        primary_color=primary_color,
        secondary_color=secondary_color,
    )
