"""Project configuration scaffolding for create-anta-app.

This module writes the branding details of a freshly cloned project into its
``config.js``. A missing file is rendered from a template; an existing file is
patched in place, touching only the known fields:

- ``siteName``
- ``siteDescription``
- ``primaryColor``
- ``secondaryColor``
"""

from create_anta_app.scaffolding.details import ProjectDetails
from create_anta_app.scaffolding.patcher import PatchResult, patch_config, patch_config_text, render_config

__all__ = ["PatchResult", "ProjectDetails", "patch_config", "patch_config_text", "render_config"]
