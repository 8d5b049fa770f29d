"""Headless launcher for the trip planner wizard.

Feeds trip preferences given on the command line through the same
widgets a user would type into, submits them to the configured
generation service and optionally exports the itinerary as a PDF.

Example:
    python start.py --destinations "Goa, Jaipur" --start 2026-12-01 \
        --end 2026-12-06 --budget 50000 --style Relaxed \
        --interest Beaches --interest Food --mode Train --export
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import List, Optional

from trip_planner.container import Container
from trip_planner.domain.models import INTEREST_CATALOG, Currency, TravelMode, TravelStyle
from trip_planner.logging_config import configure_logging
from trip_planner.services import TripPlannerSession
from trip_planner.widgets import ENTER


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Plan a trip and generate an itinerary.")
    parser.add_argument("--destinations", required=True, help="Comma-separated cities")
    parser.add_argument("--start", required=True, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--end", required=True, help="End date (YYYY-MM-DD)")
    parser.add_argument("--budget", required=True)
    parser.add_argument("--currency", choices=[c.value for c in Currency], default="INR")
    parser.add_argument("--style", choices=[s.value for s in TravelStyle])
    parser.add_argument(
        "--interest", action="append", default=[], choices=INTEREST_CATALOG
    )
    parser.add_argument("--mode", choices=[m.value for m in TravelMode])
    parser.add_argument("--export", action="store_true", help="Export the itinerary as PDF")
    return parser


def fill_form(session: TripPlannerSession, args: argparse.Namespace) -> None:
    form = session.form

    form.destination_editor.paste(args.destinations + ",")

    for widget, value in (
        (form.start_date_field, args.start),
        (form.end_date_field, args.end),
    ):
        widget.focus()
        widget.edit(value)
        widget.blur()

    form.budget_field.focus()
    form.budget_field.edit(args.budget)
    form.budget_field.key_down(ENTER)

    form.select_currency(args.currency)
    if args.style:
        form.select_travel_style(args.style)
    if args.mode:
        form.select_mode_of_travel(args.mode)
    for interest in dict.fromkeys(args.interest):
        form.toggle_interest(interest)


async def run(args: argparse.Namespace) -> int:
    container = Container.create_default()
    configure_logging(container.config.observability)

    session: TripPlannerSession = container.resolve(TripPlannerSession)
    session.start_planning()
    fill_form(session, args)

    if not await session.submit():
        return 1

    print(session.itinerary)

    if args.export and not await session.export_pdf():
        return 2
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
