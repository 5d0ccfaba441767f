"""create-anta-app: scaffold a new Anta app from the Next.js starter.

The template repository is cloned, branding details are collected and
written into the project's ``config.js``, then dependencies are installed and
the development server is started.

Basic usage::

    $ create-anta-app my-anta-app

Programmatic usage:
    from pathlib import Path

    from create_anta_app import ProjectDetails, patch_config

    details = ProjectDetails.create(project_title="My Anta App", tagline="Built with Anta")
    patch_config(Path("my-anta-app/config.js"), details)
"""

from create_anta_app.commands import create_app
from create_anta_app.config import LoggingConfig, ScaffoldConfig
from create_anta_app.scaffolding import PatchResult, ProjectDetails, patch_config

__all__ = (
    "LoggingConfig",
    "PatchResult",
    "ProjectDetails",
    "ScaffoldConfig",
    "create_app",
    "patch_config",
)
