"""
Utility functions shared across islang tests.
"""
from pathlib import Path
import sys

from islang.config import Config
from islang.interpreter import Interpreter
from islang.lexer import Scanner
from islang.parser import Parser
from islang.registry import Registry

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def make_parser(source: str, config: Config | None = None) -> Parser:
    """
    Build a parser with a fresh registry over the given source.
    """
    config = config or Config()
    return Parser(Scanner(source), Registry(config.scope_policy), config)


def parse_source(source: str, config: Config | None = None) -> list:
    """
    Parse source code and return the AST.
    """
    return make_parser(source, config).parse_all()


def run_source(source: str, config: Config | None = None) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    interpreter = Interpreter(make_parser(source, config))
    interpreter.interpret()
    return interpreter


def output_lines(capsys) -> list[str]:
    """
    Return captured stdout as a list of lines.
    """
    return capsys.readouterr().out.strip().splitlines()
