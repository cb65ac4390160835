"""
Apply one or more casing modes to input text from the command line.
Run: python -m scripts.convert_case [modes] [input]   (from project root)

Examples:
  python -m scripts.convert_case lower kebab "Some Text"
  echo "Some Text" | python -m scripts.convert_case kebab
  python -m scripts.convert_case "Some Text"          # print every casing
  python -m scripts.convert_case -- upper "-dashed input"
"""
import argparse
import os
import sys

# Add parent so we can import from the project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scripts._cli import CommandParser, UsageError
from services.casing import UnknownCasingRule, convert_all, convert_chain, rule_keys


def build_parser() -> argparse.ArgumentParser:
    parser = CommandParser(
        prog="convert_case",
        description="Apply one or more casing transformations to input text.",
        epilog=f"Modes: {', '.join(rule_keys())}. "
        "When stdin is piped every argument is a mode; otherwise the last argument is the input. "
        "Put -- before the arguments when the input starts with a dash.",
    )
    parser.add_argument("args", nargs="*", metavar="[modes] [input]")
    return parser


def main(argv=None, stdin=None, stdout=None, stderr=None) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    parser = build_parser()
    try:
        args = parser.parse_args(argv).args
    except UsageError as e:
        print(f"Error: {e}", file=stderr)
        parser.print_usage(stderr)
        return 2

    if not stdin.isatty():
        text = stdin.read().strip()
        modes = args
    elif args:
        text = args[-1]
        modes = args[:-1]
    else:
        print("Error: input text is required", file=stderr)
        parser.print_usage(stderr)
        return 1

    if not modes:
        for result in convert_all(text):
            print(f"{result.name}: {result.output}", file=stdout)
        return 0

    try:
        output = convert_chain(text, modes)
    except UnknownCasingRule as e:
        print(f"Error: {e}", file=stderr)
        parser.print_usage(stderr)
        return 1
    print(output, file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
