"""Runtime configuration.

Settings are plain constructor arguments, with :meth:`Config.from_env`
reading the same settings from ``ISLANG_*`` environment variables for the
command line entry point.


File: config.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os
from dataclasses import dataclass
from enum import Enum

DEFAULT_MAX_DEPTH = 100
DEFAULT_MAX_VECTOR_GAP = 100_000


class ScopePolicy(str, Enum):
    """
    How the parser resolves variable names declared inside function bodies.
    """

    # One frame per function body on top of the global frame.
    LEXICAL = "lexical"
    # Names declared in a body stay visible for the rest of the parse.
    SHARED = "shared"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


@dataclass(frozen=True)
class Config:
    """
    Settings shared by the parser and interpreter of one program run.
    """
    scope_policy: ScopePolicy = ScopePolicy.LEXICAL
    max_depth: int = DEFAULT_MAX_DEPTH
    # Most slots an indexed write may add past the end of a vector.
    max_vector_gap: int = DEFAULT_MAX_VECTOR_GAP
    debug: bool = False

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.max_vector_gap < 0:
            raise ValueError(f"max_vector_gap must not be negative, got {self.max_vector_gap}")

    @classmethod
    def from_env(cls, environ=None) -> 'Config':
        """
        Build a configuration from ``ISLANG_SCOPE``, ``ISLANG_MAX_DEPTH``,
        ``ISLANG_MAX_VECTOR_GAP`` and ``ISLANG_DEBUG``.

        Parameters:
            environ (Mapping[str, str] | None): Defaults to ``os.environ``.

        Raises:
            ValueError: If a variable holds an unusable value.
        """
        if environ is None:
            environ = os.environ

        scope = environ.get('ISLANG_SCOPE', ScopePolicy.LEXICAL.value).strip().lower()
        try:
            scope_policy = ScopePolicy(scope)
        except ValueError:
            raise ValueError(
                f"ISLANG_SCOPE must be one of "
                f"{', '.join(p.value for p in ScopePolicy)}, got '{scope}'"
            ) from None

        max_depth = _int_setting(environ, 'ISLANG_MAX_DEPTH', DEFAULT_MAX_DEPTH)
        max_vector_gap = _int_setting(environ, 'ISLANG_MAX_VECTOR_GAP', DEFAULT_MAX_VECTOR_GAP)

        debug = environ.get('ISLANG_DEBUG', '') not in ('', '0', 'false', 'no')
        return cls(scope_policy=scope_policy, max_depth=max_depth,
                   max_vector_gap=max_vector_gap, debug=debug)


def _int_setting(environ, name: str, default: int) -> int:
    raw = environ.get(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None
