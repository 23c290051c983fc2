"""Jinja environment setup and registry binding.

Creates a jinja2 Environment from a RegistryConfig and exposes the
registry's queries as template globals, so layouts can build menus
without the view passing links in::

    {% from "navpaths/nav.html" import nav_list %}
    {{ nav_list(nav_links("main"), current=request_path) }}
"""

from collections.abc import Callable
from typing import Any

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from navpaths.config import RegistryConfig
from navpaths.registry import PathRegistry
from navpaths.templating.filters import BUILTIN_FILTERS


def create_environment(
    registry: PathRegistry,
    config: RegistryConfig | None = None,
    filters: dict[str, Callable[..., Any]] | None = None,
) -> Environment:
    """Create a jinja2 Environment bound to *registry*.

    *config* defaults to the registry's own configuration. A configured
    ``template_dir`` is searched before the built-in macros, so
    applications can override ``navpaths/nav.html``.
    """
    config = config or registry.config

    loaders: list[BaseLoader] = []
    if config.template_dir is not None:
        loaders.append(FileSystemLoader(str(config.template_dir)))
    loaders.append(PackageLoader("navpaths.templating", "macros"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )

    env.filters.update(BUILTIN_FILTERS)
    # User-defined filters may override built-ins
    if filters:
        env.filters.update(filters)

    env.globals.update(
        nav_links=registry.extract_nav_links,
        group_paths=registry.extract_group_paths,
        get_path=registry.get_path,
        navpaths_active_class=config.active_class,
    )
    return env
