"""Command-line front end for a country session.

Usage:
    python -m country_explorer list --search united --region Americas
    python -m country_explorer show France
    python -m country_explorer toggle France
"""
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import List, Optional

from .config import Settings, get_settings
from .exceptions import ConfigurationError, CountryExplorerError
from .logging_setup import configure_logging
from .models import Country
from .session import CountrySession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="country_explorer",
        description="Browse countries, manage saved countries, report views",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    parser.add_argument("--offline", action="store_true", help="Use the bundled dataset only")

    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List countries")
    list_cmd.add_argument("--search", default="", help="Case-insensitive name filter")
    list_cmd.add_argument("--region", default="", help="Exact region name")

    sub.add_parser("regions", help="List regions present in the dataset")

    show_cmd = sub.add_parser("show", help="Show one country and record a view")
    show_cmd.add_argument("name", help="Country display name, e.g. 'France'")

    sub.add_parser("saved", help="List saved countries")

    toggle_cmd = sub.add_parser("toggle", help="Save or unsave a country")
    toggle_cmd.add_argument("name", help="Country display name")

    return parser


def format_country(country: Country) -> str:
    return (
        f"{country.name} ({country.code}) | "
        f"population {country.population:,} | "
        f"region {country.region or 'N/A'} | "
        f"capital {country.capital or 'N/A'}"
    )


async def run_command(args: argparse.Namespace, settings: Settings) -> int:
    async with CountrySession(settings) as session:
        if args.command == "list":
            for country in session.search(args.search, args.region):
                print(format_country(country))

        elif args.command == "regions":
            for region in session.regions:
                print(region)

        elif args.command == "show":
            country = session.country(args.name)
            if country is None:
                print(f"No country named {args.name!r}", file=sys.stderr)
                return 1
            print(format_country(country))
            print(f"Saved: {session.membership(country.name).value}")
            neighbors = session.neighbors_of(country.name) or []
            print("Border countries: " + (", ".join(n.name for n in neighbors) or "None"))
            state = await session.view(country.name)
            print(f"Views: {state.display()}")

        elif args.command == "saved":
            saved = session.saved_countries()
            if not saved:
                print("No saved countries yet.")
            for country in saved:
                print(format_country(country))

        elif args.command == "toggle":
            try:
                state = await session.toggle_saved(args.name)
            except CountryExplorerError as e:
                print(f"Could not update {args.name}: {e.message}", file=sys.stderr)
                return 1
            print(f"{args.name}: {state.value}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ConfigurationError as e:
        print(e.message, file=sys.stderr)
        return 2
    if args.offline:
        settings = settings.model_copy(update={"offline": True})
    configure_logging(args.log_level or settings.log_level)
    return asyncio.run(run_command(args, settings))
