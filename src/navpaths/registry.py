"""Path registry: keyed store of navigation paths with filtered views.

``PathEntry`` is the frozen definition, ``PathRegistry`` is the lookup
table. Registration normally happens once during startup; every query
after that is a read.

Free-threading safety:
    - PathEntry and NavLink are frozen dataclasses (immutable, safe to share)
    - PathRegistry uses a Lock around writes and every read of the dict
    - Queries scan a snapshot, never the live dict
"""

import logging
import threading
from collections.abc import Callable, Iterable
from typing import Any

from navpaths.config import RegistryConfig
from navpaths.entry import NavLink, PathEntry, PathFunction
from navpaths.errors import RegistrationError

logger = logging.getLogger("navpaths.registry")


class PathRegistry:
    """Registry of path entries keyed by identifier.

    Usage::

        paths = PathRegistry()
        paths.register("home", lambda: "/", "Home", navs=["main"])
        paths.register("profile", lambda id: f"/user/{id}", "Profile", ["main"], "user")

        for link in paths.extract_nav_links("main"):
            print(link.label, link.href())

    There is no module-level instance. Applications that want one shared
    registry hold it themselves.
    """

    __slots__ = ("_config", "_lock", "_paths")

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self._config = config or RegistryConfig()
        self._lock = threading.Lock()
        self._paths: dict[str, PathEntry] = {}

    @property
    def config(self) -> RegistryConfig:
        return self._config

    # -- Registration --

    def register(
        self,
        key: str,
        path: PathFunction,
        label: str,
        navs: Iterable[str] = (),
        group: str | None = None,
    ) -> None:
        """Store the path for *key*, replacing any previous entry.

        Duplicate keys are not an error: the last registration wins and
        nothing from the earlier entry is kept. The path function is
        stored as-is and never called here.
        """
        if self._config.strict and isinstance(navs, str):
            # A bare string would register each character as a nav name
            raise RegistrationError(key, "navs must be a sequence of names, not a string")
        try:
            nav_names = tuple(navs)
        except TypeError:
            if not self._config.strict:
                raise
            raise RegistrationError(key, f"navs must be a sequence of names, got {navs!r}") from None
        if self._config.strict:
            _check_registration(key, path, label, nav_names, group)

        entry = PathEntry(key=key, path=path, label=label, navs=nav_names, group=group)
        with self._lock:
            replaced = key in self._paths
            self._paths[key] = entry

        if replaced and self._config.log_overwrites:
            logger.info("Replaced path %r (label=%r)", key, label)
        logger.debug("Registered path %r navs=%r group=%r", key, entry.navs, group)

    def define(
        self,
        key: str,
        label: str,
        navs: Iterable[str] = (),
        group: str | None = None,
    ) -> Callable[[PathFunction], PathFunction]:
        """Decorator form of ``register()``.

        The decorated function becomes the path function and is returned
        unchanged::

            @paths.define("post", "Post", navs=["blog"], group="blog")
            def post_path(slug: str) -> str:
                return f"/blog/{slug}"
        """

        def decorator(func: PathFunction) -> PathFunction:
            self.register(key, func, label, navs, group)
            return func

        return decorator

    # -- Queries --

    def extract_nav_links(self, nav_name: str) -> list[NavLink]:
        """Return a view of every entry whose navs contain *nav_name*.

        Matching is exact and case-sensitive. Order follows registration
        order. No match returns an empty list.
        """
        return [entry.to_nav_link() for entry in self._snapshot() if entry.in_nav(nav_name)]

    def extract_group_paths(self, group_name: str) -> list[NavLink]:
        """Return a view of every entry whose group equals *group_name*.

        Ungrouped entries never match, including for ``""``.
        """
        return [entry.to_nav_link() for entry in self._snapshot() if entry.in_group(group_name)]

    def get_path(self, key: str) -> NavLink | None:
        """Look up a path by key. Returns ``None`` if not found."""
        with self._lock:
            entry = self._paths.get(key)
        if entry is None:
            return None
        return entry.to_nav_link()

    def get_entry(self, key: str) -> PathEntry | None:
        """Look up the full stored entry by key. Returns ``None`` if not found."""
        with self._lock:
            return self._paths.get(key)

    def get_paths(self) -> dict[str, PathEntry]:
        """Return a copy of the registry, keyed by path key.

        The returned dict is new on every call. Changing it does not touch
        the registry, and later registrations do not show up in it.
        """
        with self._lock:
            return dict(self._paths)

    def nav_names(self) -> list[str]:
        """Distinct nav names across all entries, in first-seen order."""
        names: dict[str, None] = {}
        for entry in self._snapshot():
            names.update(dict.fromkeys(entry.navs))
        return list(names)

    def group_names(self) -> list[str]:
        """Distinct group names across all entries, in first-seen order."""
        names: dict[str, None] = {}
        for entry in self._snapshot():
            if entry.group is not None:
                names[entry.group] = None
        return list(names)

    def _snapshot(self) -> tuple[PathEntry, ...]:
        with self._lock:
            return tuple(self._paths.values())

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, key: object) -> bool:
        return key in self._paths

    def __repr__(self) -> str:
        return f"<PathRegistry {len(self._paths)} paths>"


def _check_registration(
    key: Any,
    path: Any,
    label: Any,
    navs: tuple[Any, ...],
    group: Any,
) -> None:
    """Validate ``register()`` arguments for strict registries.

    Raises ``RegistrationError`` on the first problem found.
    """
    if not isinstance(key, str) or not key:
        raise RegistrationError(key, "key must be a non-empty string")
    if not callable(path):
        raise RegistrationError(key, f"path must be callable, got {type(path).__name__}")
    if not isinstance(label, str):
        raise RegistrationError(key, f"label must be a string, got {type(label).__name__}")
    for nav in navs:
        if not isinstance(nav, str):
            raise RegistrationError(key, f"nav names must be strings, got {nav!r}")
    if group is not None and not isinstance(group, str):
        raise RegistrationError(key, f"group must be a string or None, got {type(group).__name__}")
