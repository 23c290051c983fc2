"""navpaths: a keyed registry of navigation paths.

Register a path function, a label, the navs it appears in and an
optional group once at startup, then build menus from it::

    from navpaths import PathRegistry

    paths = PathRegistry()
    paths.register("home", lambda: "/", "Home", navs=["main"])
    paths.register("profile", lambda id: f"/user/{id}", "Profile", ["main"], "user")

    paths.extract_nav_links("main")     # [NavLink(label="Home"), NavLink(label="Profile")]
    paths.get_path("profile").href(42)  # "/user/42"

HTML menus (``navpaths.templating``)::

    from navpaths.templating import create_environment, render_nav
    env = create_environment(paths)
    render_nav(env, "main", current="/")
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "NavLink",
    "NavPathsError",
    "PathEntry",
    "PathRegistry",
    "RegistrationError",
    "RegistryConfig",
    "load_paths",
    "load_paths_sync",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import navpaths`` from pulling in anyio until loaders are used.
    """
    if name == "PathRegistry":
        from navpaths.registry import PathRegistry

        return PathRegistry

    if name in ("NavLink", "PathEntry"):
        from navpaths import entry as _entry

        return getattr(_entry, name)

    if name == "RegistryConfig":
        from navpaths.config import RegistryConfig

        return RegistryConfig

    if name in ("ConfigurationError", "NavPathsError", "RegistrationError"):
        from navpaths import errors as _errors

        return getattr(_errors, name)

    if name in ("load_paths", "load_paths_sync"):
        from navpaths import loading as _loading

        return getattr(_loading, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
