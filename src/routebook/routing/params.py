"""Path parameter requirements.

Every ``{name}`` token in a template is guarded by a regular expression.
Routes may override it per parameter via their ``requirements`` mapping.
"""

import re

from routebook.errors import ConfigurationError

# One or more characters other than "/"
DEFAULT_REQUIREMENT = r"[^/]+"


def compile_requirement(name: str, pattern: object) -> re.Pattern[str]:
    """Compile the requirement pattern for parameter *name*.

    Raises ``ConfigurationError`` if *pattern* is not a string or is not a
    valid regular expression.
    """
    if not isinstance(pattern, str):
        msg = f"Requirement for parameter {name!r} must be a string, got {type(pattern).__name__}"
        raise ConfigurationError(msg)
    try:
        return re.compile(pattern)
    except re.error as exc:
        msg = f"Invalid requirement {pattern!r} for parameter {name!r}: {exc}"
        raise ConfigurationError(msg) from exc
