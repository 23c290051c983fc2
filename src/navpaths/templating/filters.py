"""Built-in navpaths template filters.

Auto-registered on every environment built by ``create_environment()``.
They turn ``NavLink`` views into URLs and attributes inside templates.
"""

import html
from typing import Any

from markupsafe import Markup

from navpaths.entry import NavLink, PathArg


def href(link: NavLink, *args: PathArg) -> str:
    """Build a link's URL by calling its path function.

    Example:
        <a href="{{ link | href }}">{{ link.label }}</a>
        <a href="{{ profile | href(user.id) }}">Profile</a>

    """
    return link.href(*args)


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Example:
        <a href="/foo"{{ cls | attr("class") }}>Foo</a>
        → <a href="/foo" class="active">Foo</a>   (when cls is "active")
        → <a href="/foo">Foo</a>                  (when cls is None or "")

    """
    if not value:
        return ""
    return Markup(f' {name}="{html.escape(str(value))}"')


def is_active(link: NavLink, current: str | None, *args: PathArg) -> bool:
    """True when the link's URL equals *current* exactly.

    Example:
        {% if link | is_active(request_path) %}aria-current="page"{% endif %}

    """
    if current is None:
        return False
    return link.href(*args) == current


BUILTIN_FILTERS: dict[str, Any] = {
    "attr": attr,
    "href": href,
    "is_active": is_active,
}
