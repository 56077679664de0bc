import argparse
import json
import logging
import sys
from pathlib import Path

from bandsintown import __version__
import bandsintown.config as cfg_module
from bandsintown.client import Client
from bandsintown.errors import BandsintownError


def _artist(args, client: Client) -> None:
    if args.mbid is not None:
        info, _ = client.artists.get_info_by_mbid(args.mbid)
    else:
        info, _ = client.artists.get_info_by_name(args.name)
    _print_json(info.to_dict())


def _events(args, client: Client) -> None:
    events, _ = client.venues.events(args.venue_id)
    _print_json([e.to_dict() for e in events])


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="bit",
        description="Query the Bandsintown API",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config", default="config.toml", metavar="PATH",
        help="Path to config.toml (default: config.toml)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every request (DEBUG level)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # artist
    sp_artist = subparsers.add_parser("artist", help="Show artist info")
    artist_key = sp_artist.add_mutually_exclusive_group(required=True)
    artist_key.add_argument("name", nargs="?", help="Artist name, e.g. 65daysofstatic")
    artist_key.add_argument("--mbid", metavar="MBID", help="Look up by MusicBrainz id instead")

    # events
    sp_events = subparsers.add_parser("events", help="List upcoming events at a venue")
    sp_events.add_argument("venue_id", type=int, help="Numeric Bandsintown venue id")

    args = parser.parse_args(argv)
    # An optional positional always counts as seen, so argparse cannot enforce required=True alone
    if args.command == "artist" and args.name is None and args.mbid is None:
        sp_artist.error("one of the arguments name --mbid is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        cfg = cfg_module.load(Path(args.config))
        with Client.from_config(cfg) as client:
            if args.command == "artist":
                _artist(args, client)
            elif args.command == "events":
                _events(args, client)
    except BandsintownError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
