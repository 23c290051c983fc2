"""PathEntry and NavLink frozen dataclasses."""

from collections.abc import Callable
from typing import TypeAlias
from dataclasses import dataclass

# Positional arguments a path function accepts
PathArg: TypeAlias = str | int | float | None

# Builds a URL path from positional arguments, e.g. ``lambda id: f"/user/{id}"``
PathFunction: TypeAlias = Callable[..., str]


@dataclass(frozen=True, slots=True)
class NavLink:
    """Read-only view of a registered path.

    Omits the registry key and nav membership. Returned by every query
    on ``PathRegistry``.
    """

    path: PathFunction
    label: str
    group: str | None = None

    def href(self, *args: PathArg) -> str:
        """Build the URL by calling the stored path function with *args*."""
        return self.path(*args)


@dataclass(frozen=True, slots=True)
class PathEntry:
    """A frozen path registration.

    Created by ``PathRegistry.register()``. ``navs`` is always a tuple so
    a stored entry cannot change after it is handed out.
    """

    key: str
    path: PathFunction
    label: str
    navs: tuple[str, ...] = ()
    group: str | None = None

    def in_nav(self, nav_name: str) -> bool:
        return nav_name in self.navs

    def in_group(self, group_name: str) -> bool:
        # An absent group never matches, not even ""
        return self.group is not None and self.group == group_name

    def to_nav_link(self) -> NavLink:
        return NavLink(path=self.path, label=self.label, group=self.group)
