"""Command-line entry point: ``svgmint -i ./svg -o ./src/assets``."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from svgmint import __version__
from svgmint.blueprints import available_blueprints
from svgmint.config import build_settings, discover_config_file
from svgmint.converter import convert
from svgmint.errors import SvgMintError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svgmint",
        description="Compile a directory of SVG files into TypeScript (or Angular) source modules",
    )
    parser.add_argument("-i", "--input", help="svg source dir (default ./svg)")
    parser.add_argument("-o", "--output", help="output dir (default ./svg-out)")
    parser.add_argument(
        "-b", "--blueprint", choices=available_blueprints(), help="output blueprint (default typescript)"
    )
    parser.add_argument("-m", "--module", help="module name, used by the angular blueprint and manifest")
    parser.add_argument("-c", "--config", help="JSON config file (default ./svgmint.json when present)")
    parser.add_argument("--manifest", action="store_true", default=None, help="also write <module>.svgmint.json")
    parser.add_argument(
        "--strict",
        dest="strict_xml",
        action="store_true",
        default=None,
        help="skip files that are not well-formed XML",
    )
    parser.add_argument(
        "--no-percent-fallback",
        dest="percent_fallback",
        action="store_false",
        default=None,
        help="keep bare viewBox dimensions instead of 100%% x 100%%",
    )
    parser.add_argument(
        "--scope-by-module",
        action="store_true",
        default=None,
        help="scope styles with the module name instead of a per-file hash",
    )
    parser.add_argument("--log-level", choices=["debug", "info", "warning", "error"], help="log verbosity")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    config_file = args.config
    if config_file is None and not args.input and not args.output:
        config_file = discover_config_file()
        if config_file is None:
            parser.print_help()
            return EXIT_USAGE
    elif config_file is not None and not os.path.isfile(config_file):
        parser.print_help()
        return EXIT_USAGE

    overrides = {k: v for k, v in vars(args).items() if k != "config"}
    try:
        settings = build_settings(overrides, config_file)
    except ValueError as e:
        print(f"svgmint: invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        convert(settings)
    except SvgMintError as e:
        logger.error("%s", e)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
