#!/usr/bin/env python3
"""
mediaembed CLI - Render embeddable media players.

Usage:
    mediaembed render "https://youtu.be/VIDEO_ID"
    mediaembed render "https://youtu.be/VIDEO_ID" --responsive --wraptag figure
    mediaembed resolve "https://youtube.com/watch?v=ID&list=PL_ID"
    mediaembed providers
    mediaembed prefs --provider vimeo
"""

import argparse
import json
import logging
import sys

from mediaembed.config.loader import get_config
from mediaembed.embed.render_pass import RenderPass
from mediaembed.exceptions import MediaEmbedError
from mediaembed.player import Player
from mediaembed.registry import get_registry, preference_defaults, tag_attributes


def _parse_params(values):
    """Turn ["name=value", ...] into a dict."""
    params = {}
    for item in values or []:
        name, sep, value = item.partition("=")
        if not sep:
            raise SystemExit(f"Invalid --param {item!r}, expected name=value")
        params[name.strip()] = value
    return params


def _find_profile(args):
    registry = get_registry()
    if args.provider:
        return registry.get(args.provider)
    profile = registry.detect(args.reference)
    if profile is None:
        raise SystemExit(
            f"No provider recognises {args.reference!r}; use --provider "
            f"({', '.join(registry.names())})"
        )
    return profile


def _cmd_render(args):
    """Handle the render subcommand."""
    profile = _find_profile(args)

    config = _parse_params(args.param)
    for dim in ("width", "height", "ratio"):
        value = getattr(args, dim)
        if value is not None:
            config[dim] = value
    if args.responsive is not None:
        config["responsive"] = args.responsive

    render_pass = RenderPass()
    player = Player(profile, preferences=get_config().preferences, render_pass=render_pass)
    player.set_play(args.reference, args.fallback).set_config(config)

    try:
        html = player.render(args.wraptag, args.css_class)
    except MediaEmbedError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print(html)
    for tag in render_pass.drain():
        print(tag)

    if player.issues:
        print(f"\nIssues ({len(player.issues)}):", file=sys.stderr)
        for issue in player.issues:
            print(f"  ! [{issue.category}] {issue.message}", file=sys.stderr)


def _cmd_resolve(args):
    """Handle the resolve subcommand."""
    profile = _find_profile(args)
    player = Player(profile, preferences={}).set_play(args.reference, args.fallback)

    result = {
        "provider": profile.name,
        "descriptors": {
            ref: descriptor.model_dump(mode="json")
            for ref, descriptor in player.descriptors.items()
        },
        "issues": [issue.to_dict() for issue in player.issues],
    }
    print(json.dumps(result, indent=2))
    sys.exit(0 if player.is_valid() else 1)


def _cmd_providers(args):
    """Handle the providers subcommand."""
    for profile in get_registry():
        categories = ", ".join(rule.category for rule in profile.rules)
        print(f"{profile.name} ({profile.mode.value}): {categories}")
        if args.verbose:
            print(f"  src: {profile.src}")
            print(f"  attributes: {', '.join(tag_attributes(profile))}")
            if profile.script:
                print(f"  script: {profile.script}")


def _cmd_prefs(args):
    """Handle the prefs subcommand."""
    config = get_config()
    prefs = preference_defaults()
    if args.provider:
        name = get_registry().get(args.provider).name
        prefs = {k: v for k, v in prefs.items() if k.startswith(f"{name}_")}

    print(f"Preferences source: {config.source.value}")
    for key, options in prefs.items():
        stored = config.get_pref(key)
        current = stored if stored is not None else options["default"]
        marker = "*" if stored is not None and stored != options["default"] else " "
        print(f" {marker} {key} = {current!r}")


def main():
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
    )

    parser = argparse.ArgumentParser(
        description="Render embeddable media players",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s render "https://youtu.be/dQw4w9WgXcQ"
    %(prog)s render "https://youtu.be/dQw4w9WgXcQ" --width 480 --param autoplay=1
    %(prog)s render dQw4w9WgXcQ --provider youtube --fallback --responsive
    %(prog)s resolve "https://bandcamp.com/EmbeddedPlayer/album=1/track=2"
    %(prog)s providers -v
    %(prog)s prefs --provider youtube
        """,
    )
    parser.add_argument("--debug", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser("render", help="Render player markup")
    render_parser.add_argument("reference", help="URL, filename or id (', ' separated)")
    render_parser.add_argument("--provider", default=None, help="Provider name (default: detect)")
    render_parser.add_argument("--fallback", action="store_true", help="Treat bare ids as playable ids")
    render_parser.add_argument("--width", default=None)
    render_parser.add_argument("--height", default=None)
    render_parser.add_argument("--ratio", default=None, help="Aspect ratio, e.g. 16:9")
    render_parser.add_argument(
        "--responsive", dest="responsive", action="store_const", const="true", default=None,
        help="Responsive player",
    )
    render_parser.add_argument(
        "--fixed", dest="responsive", action="store_const", const="false",
        help="Fixed size player",
    )
    render_parser.add_argument(
        "--param", action="append", metavar="NAME=VALUE",
        help="Player parameter (repeatable)",
    )
    render_parser.add_argument("--wraptag", default=None, help="Wrapping element")
    render_parser.add_argument("--class", dest="css_class", default=None, help="Wrapper class")

    resolve_parser = subparsers.add_parser("resolve", help="Show resolved descriptors as JSON")
    resolve_parser.add_argument("reference", help="URL, filename or id (', ' separated)")
    resolve_parser.add_argument("--provider", default=None, help="Provider name (default: detect)")
    resolve_parser.add_argument("--fallback", action="store_true", help="Treat bare ids as playable ids")

    providers_parser = subparsers.add_parser("providers", help="List providers")
    providers_parser.add_argument("-v", "--verbose", action="store_true", help="Show details")

    prefs_parser = subparsers.add_parser("prefs", help="Show stored preferences")
    prefs_parser.add_argument("--provider", default=None, help="Only this provider")

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if args.command == "render":
            _cmd_render(args)
        elif args.command == "resolve":
            _cmd_resolve(args)
        elif args.command == "providers":
            _cmd_providers(args)
        elif args.command == "prefs":
            _cmd_prefs(args)
        else:
            parser.print_help()
    except MediaEmbedError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
