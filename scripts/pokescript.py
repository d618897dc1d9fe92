#!/usr/bin/env python3
"""pokescript — print a unicode colorscript of a pokemon in your shell.

Usage:
    pokescript --list
    pokescript --name <NAME> [--form <FORM>] [--shiny] [--big] [--no-title]
    pokescript --random [<SPEC>] [--shiny] [--big] [--no-title]
    pokescript --random-by-names <NAME,NAME,...> [--shiny] [--big] [--no-title]

When several selection flags are given, the first of --list, --name,
--random, --random-by-names wins.

Exit codes:
    0  — success, help, or --list
    1  — unknown pokemon / form / generation, missing sprite, no valid names
    2  — invalid usage (e.g. --form combined with a random mode)
"""

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path so catalog/*, resolvers/* etc. are
# importable when the script is invoked from any working directory.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.errors import NoValidNames, PokescriptError, UnknownForm  # noqa: E402
from app.utils.logging import configure_logging  # noqa: E402
from catalog.loader import list_names, load  # noqa: E402
from models.selection import SelectionMode, SelectionRequest  # noqa: E402
from render.renderer import Renderer  # noqa: E402
from resolvers.selector import DEFAULT_GENERATIONS, Selector  # noqa: E402
from store.asset_store import AssetStore  # noqa: E402

__version__ = "1.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pokescript",
        usage="pokescript [OPTION] [POKEMON NAME]",
        description="CLI utility to print out unicode image of a pokemon in your shell",
    )
    parser.add_argument("-l", "--list", action="store_true",
                        help="Print list of all pokemon")
    parser.add_argument("-n", "--name", metavar="NAME",
                        help="Select pokemon by name")
    parser.add_argument("-f", "--form", metavar="FORM",
                        help="Show an alternate form of a pokemon")
    parser.add_argument("--show-title", dest="show_title", action="store_true", default=True,
                        help="Display the pokemon name above the sprite (default)")
    parser.add_argument("--no-title", dest="show_title", action="store_false",
                        help="Do not display pokemon name")
    parser.add_argument("-s", "--shiny", action="store_true",
                        help="Show the shiny version of the pokemon instead")
    parser.add_argument("-b", "--big", dest="large", action="store_true",
                        help="Show a larger version of the sprite")
    parser.add_argument("-r", "--random", nargs="?", const=DEFAULT_GENERATIONS, metavar="SPEC",
                        help="Show a random pokemon from a specific generation (1-8), "
                             "range (eg. 1-3) or list (eg. 2,4)")
    parser.add_argument("--random-by-names", metavar="NAMES",
                        help="Show a random pokemon from a comma-separated list of names "
                             "(eg. charmander,bulbasaur)")
    parser.add_argument("-V", "--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def build_request(args: argparse.Namespace) -> SelectionRequest | None:
    """Map parsed flags to a SelectionRequest; None means no selection flag.

    Raises:
        UsageError: ``--form`` was combined with a random mode.
    """
    common = {"form": args.form, "shiny": args.shiny, "large": args.large}
    if args.name is not None:
        return SelectionRequest(mode=SelectionMode.EXPLICIT, name=args.name, **common)
    if args.random is not None:
        return SelectionRequest(
            mode=SelectionMode.RANDOM_BY_GENERATION, generations=args.random, **common
        )
    if args.random_by_names is not None:
        return SelectionRequest(
            mode=SelectionMode.RANDOM_BY_NAMES, names=args.random_by_names, **common
        )
    return None


def _report_unknown_form(exc: UnknownForm) -> None:
    print(str(exc), file=sys.stderr)
    if not exc.alternatives:
        print(f"No alternate forms available for {exc.name}", file=sys.stderr)
        return
    print("Available alternate forms are:", file=sys.stderr)
    for form in exc.alternatives:
        print(f"- {form}", file=sys.stderr)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    catalog = load()

    if args.list:
        for name in list_names(catalog):
            print(name)
        return 0

    request = build_request(args)
    if request is None:
        parser.print_help()
        return 0

    resolved = Selector(catalog).select(request)
    Renderer(AssetStore()).render_asset(resolved, show_title=args.show_title)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    try:
        return run(args, parser)
    except UnknownForm as exc:
        _report_unknown_form(exc)
        return exc.exit_code
    except NoValidNames as exc:
        # Per-name warnings were already written by the selector.
        print(str(exc), file=sys.stderr)
        return exc.exit_code
    except PokescriptError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return exc.exit_code


if __name__ == "__main__":
    sys.exit(main())
