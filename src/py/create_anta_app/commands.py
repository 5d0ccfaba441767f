"""create-anta-app commands module.

This module runs the scaffolding steps in order: clone the template
repository, collect the branding details, write them into ``config.js``,
then install dependencies and start the development server.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from create_anta_app.exceptions import CloneError, ConfigPatchError, ExecutableNotFoundError, ExecutionError
from create_anta_app.git import clone_repository
from create_anta_app.prompts import ask_project_details, ask_project_name
from create_anta_app.scaffolding import patch_config
from create_anta_app.utils import console, format_command

if TYPE_CHECKING:
    from create_anta_app.config import ScaffoldConfig
    from create_anta_app.scaffolding import PatchResult, ProjectDetails

__all__ = (
    "clone_template",
    "create_app",
    "install_dependencies",
    "start_dev_server",
    "update_config_file",
)

logger = logging.getLogger("create_anta_app")


def clone_template(config: "ScaffoldConfig", project_name: str, cwd: Path) -> Path:
    """Clone the template repository into ``cwd / project_name``.

    Raises:
        CloneError: If the repository cannot be cloned.
        ExecutableNotFoundError: If git is not installed.

    Returns:
        The project directory.
    """
    with console.status("Cloning repository..."):
        try:
            project_dir = clone_repository(config.repo_url, project_name, cwd=cwd)
        except (CloneError, ExecutableNotFoundError):
            console.print("[red]✗ Failed to clone repository[/]")
            raise
    console.print("[green]✓ Repository cloned successfully[/]")
    return project_dir


def update_config_file(config: "ScaffoldConfig", project_dir: Path, details: "ProjectDetails") -> "PatchResult":
    """Write ``details`` into the project's configuration file.

    Raises:
        ConfigPatchError: If the configuration file cannot be read or written.

    Returns:
        The patch outcome.
    """
    logger.debug("Writing project details: %s", details.as_fields())
    with console.status("Updating configuration..."):
        try:
            result = patch_config(project_dir / config.config_file, details)
        except ConfigPatchError:
            console.print("[red]✗ Failed to update configuration[/]")
            raise
    if result.created:
        console.print("[green]✓ Configuration file created[/]")
    else:
        console.print("[green]✓ Configuration updated successfully[/]")
    return result


def install_dependencies(config: "ScaffoldConfig", project_dir: Path) -> bool:
    """Install the project dependencies.

    Failures are reported with the manual command and do not abort the run.

    Returns:
        True when the installation succeeded.
    """
    executor = config.executor_instance
    with console.status("Installing dependencies..."):
        try:
            executor.install(project_dir)
        except (ExecutionError, ExecutableNotFoundError, OSError) as e:
            logger.debug("Dependency installation failed: %s", e)
            console.print("[red]✗ Failed to install dependencies[/]")
            console.print(
                f"[yellow]You can install dependencies manually by running: {format_command(executor.install_command)}[/]"
            )
            return False
    console.print("[green]✓ Dependencies installed successfully[/]")
    return True


def start_dev_server(config: "ScaffoldConfig", project_dir: Path) -> bool:
    """Run the development server in the foreground until it exits or Ctrl+C.

    Failures are reported with the manual command and do not abort the run.

    Returns:
        True when the server started and was stopped normally.
    """
    executor = config.executor_instance
    dev_command = executor.dev_command
    console.print("\n[blue]🌐 Starting development server...[/]")
    console.print("[dim]Press Ctrl+C to stop the server[/]\n")

    try:
        process = executor.run(dev_command, cwd=project_dir)
    except (ExecutableNotFoundError, OSError) as e:
        logger.debug("Development server failed to start: %s", e)
        _print_dev_server_hint(dev_command)
        return False

    try:
        return_code = process.wait()
    except KeyboardInterrupt:
        process.terminate()
        process.wait()
        console.print("\n[yellow]Development server stopped.[/]")
        return True

    if return_code != 0:
        logger.debug("Development server exited with return code %s", return_code)
        _print_dev_server_hint(dev_command)
        return False
    return True


def _print_dev_server_hint(dev_command: list[str]) -> None:
    console.print("\n[yellow]⚠️  Could not start development server.[/]")
    console.print(f"[dim]You can start it manually by running: {format_command(dev_command)}[/]")


def create_app(config: "ScaffoldConfig", project_name: "str | None" = None, cwd: "Path | None" = None) -> Path:
    """Scaffold a new Anta app.

    Args:
        config: Settings for this run.
        project_name: Project directory name. Prompted for when omitted.
        cwd: Directory the project is created in. Defaults to the current directory.

    Raises:
        ValueError: If ``project_name`` is not a valid project name.
        CloneError: If the template repository cannot be cloned.
        ExecutableNotFoundError: If git is not installed.
        ConfigPatchError: If the configuration file cannot be written.

    Returns:
        The project directory.
    """
    workdir = Path(cwd) if cwd is not None else Path.cwd()
    console.print("\n[bold blue]🚀 Welcome to create-anta-app![/]\n")

    name = ask_project_name(project_name, no_prompt=config.no_prompt)
    project_dir = clone_template(config, name, workdir)
    details = ask_project_details(no_prompt=config.no_prompt)
    update_config_file(config, project_dir, details)

    if not config.skip_install:
        install_dependencies(config, project_dir)

    console.print("\n[bold green]✅ Anta app created successfully![/]\n")
    console.print(f"[yellow]📁 Project directory: {project_dir.resolve()}[/]")
    console.print(f"[yellow]🌐 Development server: {config.dev_server_url}[/]")
    console.print("\n[dim]Happy coding! 🎉[/]\n")

    if not config.skip_dev:
        start_dev_server(config, project_dir)

    return project_dir
