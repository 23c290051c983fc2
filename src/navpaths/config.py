"""Registry configuration.

RegistryConfig is a frozen dataclass, immutable after creation, shared
by the registry and the template environment built from it.
"""

from dataclasses import dataclass
from pathlib import Path

from navpaths.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Registry configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RegistryConfig(strict=True, template_dir="templates")
    """

    # Registration
    strict: bool = False  # Fail fast on malformed register() arguments
    log_overwrites: bool = True

    # Templates
    template_dir: str | Path | None = None  # Searched before the built-in macros
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # Rendering
    active_class: str = "active"

    def __post_init__(self) -> None:
        if not self.active_class:
            msg = "active_class must be a non-empty string."
            raise ConfigurationError(msg)
