"""Navigation rendering: jinja2 macros and helpers for registry views.

Built-in macros live under ``macros/navpaths/`` and are loaded through
``PackageLoader("navpaths.templating", "macros")``.
"""

from navpaths.templating.filters import BUILTIN_FILTERS
from navpaths.templating.integration import create_environment
from navpaths.templating.render import render_group, render_nav

__all__ = [
    "BUILTIN_FILTERS",
    "create_environment",
    "render_group",
    "render_nav",
]
