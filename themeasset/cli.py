#!/usr/bin/env python3
"""
themeasset CLI

Render or inspect the assets described by a YAML manifest:
  themeasset render - Print the HTML tags for a manifest
  themeasset order  - Print asset names in dependency order

Usage:
  themeasset render <manifest> [--group style|script|all] [--config <file>] [--asset-url <url>]
  themeasset order <manifest> --group style|script [--config <file>]
"""

import argparse
import logging
import sys
from typing import List, Optional

from .asset import AssetGroup
from .config import AssetConfig
from .container import AssetContainer
from .errors import AssetError
from .manifest import Manifest

logger = logging.getLogger(__name__)


def build_container(args) -> AssetContainer:
    """Load config and manifest from parsed arguments."""
    config = AssetConfig.from_file(args.config) if args.config else AssetConfig()
    if getattr(args, "asset_url", None):
        config.asset_url = args.asset_url

    container = AssetContainer("cli", config)
    Manifest.from_file(args.manifest).apply(container)
    return container


def cmd_render(args):
    """Print rendered tags."""
    container = build_container(args)

    if args.group == "all":
        groups = [AssetGroup.STYLE, AssetGroup.SCRIPT]
    else:
        groups = [AssetGroup.parse(args.group)]

    # Scheme forcing applies only when no asset_url is configured
    for group in groups:
        sys.stdout.write(container.render_group(group, secure=args.secure))


def cmd_order(args):
    """Print resolved asset names, one per line."""
    container = build_container(args)
    for name in container.resolve(args.group):
        print(name)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="themeasset",
        description="themeasset - Theme asset ordering and rendering",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # render command
    render_parser = subparsers.add_parser("render", help="Render asset tags")
    render_parser.add_argument("manifest", help="Manifest YAML file")
    render_parser.add_argument("--group", choices=["style", "script", "all"], default="all",
                               help="Group to render (default: all)")
    render_parser.add_argument("--config", help="Config YAML file")
    render_parser.add_argument("--asset-url", help="Override configured asset URL")
    render_parser.add_argument("--secure", dest="secure", action="store_true", default=None,
                               help="Force https for request-derived URLs")
    render_parser.add_argument("--insecure", dest="secure", action="store_false",
                               help="Force http for request-derived URLs")

    # order command
    order_parser = subparsers.add_parser("order", help="Print assets in dependency order")
    order_parser.add_argument("manifest", help="Manifest YAML file")
    order_parser.add_argument("--group", choices=["style", "script"], required=True,
                              help="Group to resolve")
    order_parser.add_argument("--config", help="Config YAML file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.command == "render":
            cmd_render(args)
        elif args.command == "order":
            cmd_order(args)
        else:
            parser.print_help()
            sys.exit(1)
    except AssetError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
