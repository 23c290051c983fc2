"""Render registry views to HTML.

Thin wrappers over the ``navpaths/nav.html`` macros for code that wants
a menu as a string rather than from inside a template.
"""

from collections.abc import Mapping, Sequence
from typing import TypeAlias

from jinja2 import Environment
from markupsafe import Markup

from navpaths.entry import NavLink, PathArg

# Path function arguments keyed by link label
LinkArgs: TypeAlias = Mapping[str, Sequence[PathArg]]

_NAV_LIST_SOURCE = (
    '{% from "navpaths/nav.html" import nav_list %}'
    "{{ nav_list(links, cls=cls, current=current, active_class=navpaths_active_class, args=args) }}"
)


def _render_links(
    env: Environment,
    links: list[NavLink],
    current: str | None,
    cls: str,
    args: LinkArgs | None,
) -> Markup:
    tpl = env.from_string(_NAV_LIST_SOURCE)
    return Markup(tpl.render(links=links, current=current, cls=cls, args=dict(args or {})).strip())


def render_nav(
    env: Environment,
    nav_name: str,
    current: str | None = None,
    cls: str = "",
    args: LinkArgs | None = None,
) -> Markup:
    """Render every link in nav *nav_name* as a ``<ul>`` menu.

    *env* must come from ``create_environment()``. The link whose URL
    equals *current* is marked active. Paths that take arguments get
    them from *args*, keyed by link label::

        render_nav(env, "main", current="/user/42", args={"Profile": [42]})
    """
    return _render_links(env, env.globals["nav_links"](nav_name), current, cls, args)


def render_group(
    env: Environment,
    group_name: str,
    current: str | None = None,
    cls: str = "",
    args: LinkArgs | None = None,
) -> Markup:
    """Render every link in group *group_name* as a ``<ul>`` menu."""
    return _render_links(env, env.globals["group_paths"](group_name), current, cls, args)
