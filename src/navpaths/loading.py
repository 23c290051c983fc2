"""Deferred path registration.

Applications often register paths from several feature modules, some of
which must load (import plugins, read a manifest) before they know their
paths. Loaders run concurrently in an anyio task group and the registry
is returned only once every loader has finished, so queries never see a
partially loaded registry.

Usage::

    async def blog_paths(paths: PathRegistry) -> None:
        posts = await fetch_posts()
        for post in posts:
            paths.register(f"post:{post.slug}", lambda s=post.slug: f"/blog/{s}", post.title)

    paths = await load_paths(PathRegistry(), core_paths, blog_paths)
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import TypeAlias
from functools import partial

import anyio

from navpaths.registry import PathRegistry

logger = logging.getLogger("navpaths.loading")

# A loader registers paths on the registry it is given; may be sync or async
PathLoader: TypeAlias = Callable[[PathRegistry], Awaitable[None] | None]


async def _run_loader(loader: PathLoader, registry: PathRegistry) -> None:
    name = getattr(loader, "__qualname__", repr(loader))
    logger.debug("Loading paths from %s", name)
    result = loader(registry)
    if inspect.isawaitable(result):
        await result
    logger.debug("Loaded paths from %s", name)


async def load_paths(registry: PathRegistry, *loaders: PathLoader) -> PathRegistry:
    """Run every loader against *registry* and return it when all are done.

    Loaders run concurrently. A loader that raises cancels the others and
    the error propagates from the task group, wrapped in an
    ``ExceptionGroup``.
    """
    before = len(registry)
    async with anyio.create_task_group() as tg:
        for loader in loaders:
            tg.start_soon(_run_loader, loader, registry)

    logger.debug(
        "Ran %d path loaders, registry grew from %d to %d paths",
        len(loaders),
        before,
        len(registry),
    )
    return registry


def load_paths_sync(registry: PathRegistry, *loaders: PathLoader) -> PathRegistry:
    """Blocking wrapper around ``load_paths()`` for startup code.

    Must not be called from inside a running event loop.
    """
    return anyio.run(partial(load_paths, registry, *loaders))
