from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rackfeed.feed.client import RackDirectoryFetcher
from rackfeed.models import Coordinate

from ..core.items import ErrorItem, RackItem
from ..core.presentation import rack_detail
from ..services.refresh_service import RackListController


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List Turku city bike racks.")
    parser.add_argument("--lat", type=float, help="Latitude to sort by distance from")
    parser.add_argument("--lon", type=float, help="Longitude to sort by distance from")
    parser.add_argument("--url", help="Override the citybike feed URL")
    parser.add_argument(
        "--record",
        type=Path,
        metavar="DIR",
        help="Save the raw feed body in DIR for later replay",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")
    return args


def render_lines(controller: RackListController) -> list[str]:
    coordinate = controller.machine.coordinate
    lines: list[str] = []
    for item in controller.machine.items():
        if isinstance(item, ErrorItem):
            lines.append(item.message)
        elif isinstance(item, RackItem):
            detail = rack_detail(item.rack, coordinate)
            distance = f" ({detail.distance_label})" if detail.distance_label else ""
            lines.append(
                f"{detail.name}{distance}: {detail.classic_bikes} classic, "
                f"{detail.electric_bikes} electric, {item.rack.empty_slots} free"
            )
    return lines


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    fetcher = RackDirectoryFetcher(url=args.url, record_dir=args.record)
    controller = RackListController(fetcher)
    if args.lat is not None:
        controller.machine.apply_coordinate(Coordinate(args.lat, args.lon))
    applied = asyncio.run(controller.refresh())

    for line in render_lines(controller):
        print(line)
    failed = any(isinstance(item, ErrorItem) for item in controller.machine.items())
    return 1 if failed or not applied else 0


if __name__ == "__main__":
    sys.exit(main())
