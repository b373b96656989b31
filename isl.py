"""
islang Interpreter

This is the main entry point for the islang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Scanner turns the source into tokens on demand.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Settings come from the ``ISLANG_SCOPE``, ``ISLANG_MAX_DEPTH``,
``ISLANG_MAX_VECTOR_GAP`` and ``ISLANG_DEBUG`` environment variables. With debug
on, the token list and AST are printed before the program runs.
"""
import logging
import sys

from termcolor import colored

from islang.config import Config
from islang.exceptions import IslangError, ParseError
from islang.interpreter import Interpreter
from islang.lexer import Scanner, TokenKind
from islang.parser import Parser
from islang.registry import Registry


def print_usage():
    """
    Print usage.
    """
    print()
    print("islang Interpreter")
    print()
    print("Usage:")
    print("    isl <script.is>")
    print()
    print("Arguments:")
    print("    <script.is>")
    print("        Path to an islang source file to execute.")
    print()
    print("Example:")
    print("    isl hello.is")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    ISLANG_SCOPE           'lexical' (default) or 'shared' variable name scoping")
    print("    ISLANG_MAX_DEPTH       maximum nesting depth for parsing and calls")
    print("    ISLANG_MAX_VECTOR_GAP  most slots one indexed write may add past a vector's end")
    print("    ISLANG_DEBUG           set to 1 to print tokens and AST before running")


def report_error(error: Exception):
    """
    Print an error in red on stderr.
    """
    print(colored(f"{type(error).__name__}: {error}", "red", attrs=["bold"]), file=sys.stderr)


def debug_print_tokens_ast(scanner: Scanner, parser: Parser):
    """
    Print tokenized source and AST, rewinding the scanner after each pass.
    """
    print("\nTokens:\n")
    for token in scanner.scan_all():
        print(token)
    scanner.reset()

    print("\nAST:\n")
    for node in parser.parse_all():
        print(node)
    parser.reset()
    print(" ")


def run_script(script_name: str, config: Config) -> int:
    """
    Run an islang script.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        report_error(e)
        return 1

    with Registry(config.scope_policy) as registry:
        try:
            scanner = Scanner(code)
            if config.debug:
                # The dump parses with a throwaway registry so the real run starts clean.
                debug_print_tokens_ast(scanner, Parser(scanner, Registry(config.scope_policy), config))
            parser = Parser(scanner, registry, config)
            interpreter = Interpreter(parser)
            interpreter.interpret()
        except IslangError as e:
            report_error(e)
            return 1
    return 0


def run_repl(config: Config) -> int:
    """
    Run the interactive REPL
    """
    print("islang Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    with Registry(config.scope_policy) as registry:
        interpreter = Interpreter(Parser(Scanner(""), registry, config))
        buffer: list[str] = []
        while True:
            try:
                prompt = ">>> " if not buffer else "... "
                line = input(prompt)
                if line.strip() in {"exit", "quit"}:
                    break
                buffer.append(line)
                source = "\n".join(buffer)
                known = registry.snapshot()
                try:
                    parser = Parser(Scanner(source), registry, config)
                    nodes = parser.parse_all()
                except IslangError as e:
                    # Names from a failed parse must not leak into later input.
                    registry.restore(known)
                    # Input ending mid-construct is incomplete, not wrong.
                    if isinstance(e, ParseError) and e.token is not None \
                            and e.token.kind == TokenKind.EOF:
                        continue
                    raise
                buffer.clear()
                interpreter.run(nodes)
            except IslangError as e:
                report_error(e)
                buffer.clear()
            except KeyboardInterrupt:
                print("\nInterrupted.")
                break
            except EOFError:
                print()
                break
    return 0


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    try:
        config = Config.from_env()
    except ValueError as e:
        report_error(e)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    args = argv[1:]
    if not args:
        return run_repl(config)
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0], config)
    print_usage()
    return 1


def entry() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    entry()
