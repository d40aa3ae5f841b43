#!/usr/bin/env python3
# hyperfetch.py
"""
hyperfetch: a system information tool in the spirit of neofetch.
Prints host details next to the distribution logo, as JSON, or just the logo.
"""
import argparse
import os
import sys

from colorama import init

import asciiart
import display
import logger
import probes
from config_loader import ConfigError, get_config_path, load_config, merge_config, primary_color, save_config
from probes.system import detect_distro_id

__version__ = "1.0.0"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hyperfetch",
        description="A comprehensive system information tool - neofetch alternative with extended features",
    )
    p.add_argument("-c", "--config", metavar="FILE", help="use custom config file")
    p.add_argument("-a", "--ascii", metavar="DISTRO", help="use specific distro's ASCII art")
    p.add_argument("--no-ascii", action="store_true", help="disable ASCII art display")
    p.add_argument("--no-colors", action="store_true", help="disable colored output")
    p.add_argument("-s", "--small", action="store_true", help="use small ASCII art")
    p.add_argument("-l", "--logo-only", action="store_true", help="print only the ASCII logo")
    p.add_argument("-j", "--json", action="store_true", help="output as JSON")
    p.add_argument("--public-ip", action="store_true", help="fetch and display public IP with geolocation")
    p.add_argument("--list-logos", action="store_true", help="list available ASCII logos")
    p.add_argument("--gen-config", action="store_true", help="write the default config file (to --config FILE if given) and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="print debug messages to stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def generate_config(path: str) -> int:
    """Write the default config to path; an existing file is left alone."""
    if os.path.exists(path):
        logger.error(f"Config file already exists: {path}")
        return 1
    if not save_config(merge_config({}), path):
        logger.error(f"Could not write config file: {path}")
        return 1
    print(f"Default config written to {path}")
    return 0


def run(args) -> int:
    if args.verbose:
        logger.set_verbose(True)

    if args.list_logos:
        display.list_logos(asciiart.list_available())
        return 0

    if args.gen_config:
        return generate_config(args.config or get_config_path())

    if args.config:
        try:
            config = load_config(args.config)
        except ConfigError as e:
            logger.error(f"Error loading config: {e}")
            config = merge_config({})
    else:
        config = load_config()

    opts = config["display"]
    use_colors = not args.no_colors and bool(opts.get("show_colors", True))
    show_ascii = not args.no_ascii and bool(opts.get("show_ascii", True))
    small = args.small or bool(opts.get("small_ascii", False))
    ascii_distro = args.ascii or opts.get("ascii_distro")

    if args.logo_only:
        art = asciiart.for_distro(ascii_distro or detect_distro_id(), small)
        display.print_logo_only(art, use_colors)
        return 0

    enabled = config.get("info", {})
    fetch_public_ip = args.public_ip or bool(enabled.get("public_ip", False))
    info = probes.gather(fetch_public_ip=fetch_public_ip, enabled=enabled)

    if args.json:
        display.print_json(info)
        return 0

    art = asciiart.for_distro(ascii_distro or info.os_id, small)
    display.print_info(info, art, show_ascii, use_colors, primary_color(config, art))
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    # Windows console support only; piped output keeps its escapes
    init(strip=False)
    try:
        return run(args)
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
