"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from routebook.routing.params import DEFAULT_REQUIREMENT


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Route loading configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(strict=True, suffixes=(".yaml", ".yml"))
    """

    # Pattern for parameters without a requirement override
    default_requirement: str = DEFAULT_REQUIREMENT

    # Route files picked up when the source is a folder (case-insensitive)
    suffixes: tuple[str, ...] = (".yaml",)

    # Abort on the first malformed descriptor or missing source
    strict: bool = False
