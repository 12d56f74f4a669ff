"""
Monorepo Shared Utilities (monoutils)

Small, dependency-free helpers shared by every app in the monorepo.

ARCHITECTURAL GUARANTEE:
------------------------
Every public function in this package is:
    - Pure (no I/O, no globals, no caches)
    - Deterministic
    - Non-mutating (inputs are never modified)

Presentation, configuration and demo wiring live in
`monoutils.config`, `monoutils.demo` and `monoutils.serialization`,
never in the utility modules themselves.
"""

from .arithmetic import sum
from .errors import ConfigError, InvalidArgumentError, UtilsError
from .sequences import chunk, unique
from .strings import capitalize, kebab_case, words

__version__ = "0.1.0"

__all__ = [
    "capitalize",
    "chunk",
    "kebab_case",
    "sum",
    "unique",
    "words",
    "ConfigError",
    "InvalidArgumentError",
    "UtilsError",
]
