"""islang: a small interpreted scripting language for ``.is`` scripts.

The pipeline is Scanner -> Parser -> AST -> Interpreter. The most commonly
used classes are re-exported here for convenience.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from islang.config import Config, ScopePolicy
from islang.interpreter import Interpreter
from islang.lexer import Scanner, Token, TokenKind
from islang.parser import Parser
from islang.registry import Registry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "Interpreter",
    "Parser",
    "Registry",
    "Scanner",
    "ScopePolicy",
    "Token",
    "TokenKind",
]
