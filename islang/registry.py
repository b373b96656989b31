"""Program-scoped declaration state.

A :class:`Registry` holds everything that outlives a single statement but
must not outlive a program run: the names the parser has seen declared, and
the function table the interpreter fills as declarations execute. Create one
per run, hand it to the parser and interpreter, and :meth:`~Registry.discard`
it afterwards (or use it as a context manager). Two runs with separate
registries never see each other's declarations.


File: registry.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from islang.config import ScopePolicy

logger = logging.getLogger(__name__)

BUILTIN_FUNCTIONS = ('print', 'length')


class Registry:
    """
    Known names for the parser and the function table for the interpreter.
    """
    def __init__(self, scope_policy: ScopePolicy = ScopePolicy.LEXICAL):
        self.scope_policy = scope_policy
        self.function_names: list[str] = []
        # scopes[0] is the global frame; one extra frame per function body being parsed.
        self.scopes: list[list[str]] = [[]]
        self.functions: dict = {}

    def __enter__(self) -> 'Registry':
        return self

    def __exit__(self, *_exc) -> None:
        self.discard()

    def discard(self) -> None:
        """
        Drop every declaration recorded so far.
        """
        self.function_names.clear()
        self.scopes = [[]]
        self.functions.clear()

    # Parse-time name tracking

    def is_function_name(self, name: str) -> bool:
        return name in BUILTIN_FUNCTIONS or name in self.function_names

    def is_variable_name(self, name: str) -> bool:
        """
        Look the name up from the innermost frame outwards.
        """
        return any(name in frame for frame in reversed(self.scopes))

    def declare_function_name(self, name: str) -> None:
        if name not in self.function_names:
            self.function_names.append(name)

    def declare_variable_name(self, name: str) -> None:
        if self.scope_policy is ScopePolicy.SHARED:
            frame = self.scopes[0]
        else:
            frame = self.scopes[-1]
        if name not in frame:
            frame.append(name)

    def snapshot(self) -> tuple:
        """
        Capture the known names so a failed parse can be rolled back with
        :meth:`restore`. The function table is not included.
        """
        return list(self.function_names), [list(frame) for frame in self.scopes]

    def restore(self, state: tuple) -> None:
        function_names, scopes = state
        self.function_names = list(function_names)
        self.scopes = [list(frame) for frame in scopes]

    def push_scope(self, names=()) -> None:
        """
        Open a frame for a function body, seeded with its parameter names.
        """
        self.scopes.append(list(names))

    def pop_scope(self) -> None:
        if len(self.scopes) == 1:
            raise RuntimeError("Cannot pop the global scope")
        self.scopes.pop()

    # Run-time function table

    def register_function(self, decl) -> None:
        """
        Store a function declaration; a later declaration of the same name wins.
        """
        if decl.name in self.functions:
            logger.debug("Redeclaring function '%s'", decl.name)
        self.functions[decl.name] = decl

    def lookup_function(self, name: str):
        return self.functions.get(name)
