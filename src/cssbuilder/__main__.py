#!/usr/bin/env python3
"""Command-line interface for cssbuilder."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, NoReturn

from .errors import SelectorError
from .selector import SimpleSelector

# Option name -> SimpleSelector method
_FRAGMENT_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


def _get_version() -> str:
    try:
        return version("cssbuilder")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


class _FragmentAction(argparse.Action):
    """Record fragments in command-line order so ordering rules apply."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        fragments = list(getattr(namespace, self.dest, None) or [])
        fragments.append((self.const, values))
        setattr(namespace, self.dest, fragments)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cssbuilder",
        description="Build a CSS selector from fragments, in the order given.",
        epilog=(
            "Examples:\n"
            "  cssbuilder --id main --class container --class editable\n"
            "  cssbuilder --element a --attr 'href$=\".png\"' --pseudo-class focus\n"
            "\n"
            "Fragments must follow the order: element, id, class, attribute,\n"
            "pseudo-class, pseudo-element.\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    for name in _FRAGMENT_METHODS:
        parser.add_argument(
            f"--{name}",
            dest="fragments",
            action=_FragmentAction,
            const=name,
            metavar="VALUE",
            help=f"Add a {name} fragment",
        )

    parser.add_argument(
        "--version",
        action="version",
        version=f"cssbuilder {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.fragments:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def build(fragments: list[tuple[str, str]]) -> str:
    selector = SimpleSelector()
    for name, value in fragments:
        selector = getattr(selector, _FRAGMENT_METHODS[name])(value)
    return selector.stringify()


def main() -> NoReturn | None:
    args = _parse_args(sys.argv[1:])

    try:
        output = build(args.fragments)
    except SelectorError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    sys.stdout.write(output)
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
