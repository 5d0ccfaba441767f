import sys
from typing import TYPE_CHECKING, Optional

from click import Choice, argument, command, option, version_option

from create_anta_app.__metadata__ import __version__

if TYPE_CHECKING:
    from create_anta_app.config import ScaffoldConfig


def _apply_cli_log_level(config: "ScaffoldConfig", *, verbose: bool = False, quiet: bool = False) -> None:
    """Override the configured log level from CLI flags and apply it.

    ``--verbose`` wins over ``--quiet`` when both are given.
    """
    if verbose:
        config.logging_config.level = "verbose"
    elif quiet:
        config.logging_config.level = "quiet"
    config.logging_config.apply()


def _build_config(
    repo_url: "Optional[str]",
    executor: "Optional[str]",
    skip_install: bool,
    skip_dev: bool,
    no_prompt: bool,
) -> "ScaffoldConfig":
    from create_anta_app.config import ScaffoldConfig

    config = ScaffoldConfig(no_prompt=no_prompt)
    if repo_url:
        config.repo_url = repo_url
    if executor:
        config.executor = executor  # type: ignore[assignment]
    config.skip_install = config.skip_install or skip_install
    config.skip_dev = config.skip_dev or skip_dev
    return config


@command(
    name="create-anta-app",
    help="Create a new Anta app from the Next.js starter repository.",
)
@argument("project_name", required=False, default=None)
@option(
    "-r",
    "--repo",
    "repo_url",
    type=str,
    help="Git repository URL of the starter template. Defaults to $CREATE_ANTA_APP_REPO or the Anta starter.",
    default=None,
    required=False,
)
@option("--skip-install", type=bool, help="Skip dependency installation.", default=False, is_flag=True)
@option("--skip-dev", type=bool, help="Skip starting the development server.", default=False, is_flag=True)
@option(
    "--executor",
    type=Choice(["node", "bun", "yarn", "pnpm"], case_sensitive=False),
    help="Package manager used to install and run the project. Defaults to $CREATE_ANTA_APP_EXECUTOR or node.",
    default=None,
    required=False,
)
@option(
    "--no-prompt",
    help="Do not prompt and use the default project details.",
    type=bool,
    default=False,
    required=False,
    show_default=True,
    is_flag=True,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@option("--quiet", type=bool, help="Only show warnings and errors in the log.", default=False, is_flag=True)
@version_option(__version__, prog_name="create-anta-app")
def create_anta_app(
    project_name: "Optional[str]",
    repo_url: "Optional[str]",
    skip_install: bool,
    skip_dev: bool,
    executor: "Optional[str]",
    no_prompt: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Scaffold a new Anta app."""
    from rich.markup import escape

    from create_anta_app.commands import create_app
    from create_anta_app.exceptions import CreateAntaAppError
    from create_anta_app.utils import console

    try:
        config = _build_config(repo_url, executor.lower() if executor else None, skip_install, skip_dev, no_prompt)
        _apply_cli_log_level(config, verbose=verbose, quiet=quiet)
        create_app(config, project_name=project_name)
    except (CreateAntaAppError, ValueError) as e:
        console.print(f"\n[bold red]❌ Error creating Anta app:[/] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)
