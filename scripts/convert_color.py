"""
Convert a colour between notations from the command line.
Run: python -m scripts.convert_color [target-format] <color>   (from project root)

Examples:
  python -m scripts.convert_color "#ff5500"                  # every format
  python -m scripts.convert_color rgb "#ff5500"
  python -m scripts.convert_color hex "oklch(0.7 0.15 60)"
"""
import argparse
import os
import sys

# Add parent so we can import from the project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scripts._cli import CommandParser, UsageError
from services.color import TARGET_FORMATS, ColorParseError, parse_color

FORMAT_ALIASES = {"hsb": "hsv"}


def build_parser() -> argparse.ArgumentParser:
    parser = CommandParser(
        prog="convert_color",
        description="Show a colour in every notation, or convert it to one target format.",
        epilog=f"Target formats: {', '.join(TARGET_FORMATS)} (hsb is accepted for hsv). "
        "Put -- before the arguments when the colour starts with a dash.",
    )
    parser.add_argument("args", nargs="*", metavar="[target-format] <color>")
    return parser


def main(argv=None, stdout=None, stderr=None) -> int:
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    parser = build_parser()
    try:
        args = parser.parse_args(argv).args
    except UsageError as e:
        print(f"Error: {e}", file=stderr)
        parser.print_usage(stderr)
        return 2

    target = None
    if args:
        first = args[0].lower()
        first = FORMAT_ALIASES.get(first, first)
        if first in TARGET_FORMATS:
            target, args = first, args[1:]

    value = " ".join(args)
    if not value:
        print("Error: color value required", file=stderr)
        parser.print_usage(stderr)
        return 1

    try:
        color = parse_color(value)
    except ColorParseError as e:
        print(f"Error: {e}", file=stderr)
        return 1

    if target is None:
        for name, output in color.format_all().items():
            print(f"{name + ':':<8}{output}", file=stdout)
    else:
        print(color.format(target), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
