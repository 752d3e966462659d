"""Kida environment setup and rendering of found templates.

Markup templates found by a lookup (``_card.html``) are rendered by kida
from the views root. View modules (``card.py``) are not templates: they are
imported through the views namespace and rendered by whatever they define.
"""

import importlib
from pathlib import Path
from types import ModuleType
from typing import Any

from kida import Environment, FileSystemLoader

from perch.config import ViewsConfig
from perch.errors import ViewLoadError
from perch.naming import view_module_name
from perch.templating.lookup import FoundTemplate


def create_environment(config: ViewsConfig) -> Environment:
    """Create a kida Environment that loads templates from the views root.

    Template names are paths relative to the root, which is exactly what
    ``FoundTemplate.virtual_path`` holds.
    """
    return Environment(
        loader=FileSystemLoader(str(config.views_root)),
        autoescape=config.autoescape,
        auto_reload=config.debug,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )


def render_template(env: Environment, template: FoundTemplate, context: dict[str, Any]) -> str:
    """Render a found markup template to string."""
    return env.get_template(template.virtual_path).render(context)


def module_name_for(config: ViewsConfig, path: Path) -> str:
    """Dotted name of the view module defined by *path*.

    Raises:
        ViewLoadError: If *path* is not below the views root.
    """
    try:
        relative = Path(path).relative_to(config.views_root)
    except ValueError:
        msg = f"{path} is outside the views root {config.views_root}"
        raise ViewLoadError(msg) from None
    return view_module_name(relative.as_posix(), token=config.namespace, marker=config.marker)


def load_view(config: ViewsConfig, template: FoundTemplate) -> ModuleType:
    """Import the view module behind a found view template.

    The views finder must be installed (see ``ViewSystem.install``).
    """
    if template.handler != config.handler:
        msg = f"{template.virtual_path} is a {template.handler!r} template, not a view module"
        raise ViewLoadError(msg)
    return importlib.import_module(module_name_for(config, template.path))
