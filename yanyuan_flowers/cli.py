"""Command line for browsing campus flowers, planning routes and keeping check-ins."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import Sequence

from .album import Album
from .campus import CampusMap, describe_flower
from .checkin import (
    DEFAULT_LOG_PATH,
    CheckinError,
    CheckinRecord,
    append_to_log,
    copy_image,
    format_date,
)
from .flowers import default_catalog
from .navigation import NavigationError, navigate, to_pixel

_MONTHS = range(0, 13)


def _campus(grid: str | None = None) -> CampusMap:
    campus = CampusMap()
    if grid is not None:
        campus.load_grid(grid)
    campus.link_flowers(default_catalog())
    return campus


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per feature."""
    parser = argparse.ArgumentParser(prog="yanyuan-flowers", description="燕园花册")
    commands = parser.add_subparsers(dest="command", required=True)

    flowers = commands.add_parser("flowers", help="list flowers")
    flowers.add_argument("--month", type=int, choices=_MONTHS, default=0,
                         help="only flowers blooming in this month (0: all)")

    locations = commands.add_parser("locations", help="list campus places")
    locations.add_argument("--month", type=int, choices=_MONTHS, default=None,
                           help="only places with flowers blooming in this month (0: any)")

    info = commands.add_parser("info", help="describe a flower")
    info.add_argument("name")

    nav = commands.add_parser("navigate", help="plan a route between two places")
    nav.add_argument("start")
    nav.add_argument("end")
    nav.add_argument("--avoid", action="store_true", help="keep away from blooming flowers")
    nav.add_argument("--month", type=int, choices=_MONTHS, default=0)
    nav.add_argument("--grid", help="text file holding the walkable grid")
    nav.add_argument("--pixels", action="store_true", help="print map pixel coordinates")

    checkin = commands.add_parser("checkin", help="record a visit")
    checkin.add_argument("--date", default=None, help="yyyy-MM-dd, today by default")
    checkin.add_argument("--location", required=True)
    checkin.add_argument("--flower", default="")
    checkin.add_argument("--image", default=None)
    checkin.add_argument("--log", default="")
    checkin.add_argument("--log-file", default=str(DEFAULT_LOG_PATH))
    checkin.add_argument("--app-dir", default=".")

    album = commands.add_parser("album", help="show recorded visits, newest first")
    album.add_argument("--log-file", default=str(DEFAULT_LOG_PATH))
    return parser


def _cmd_flowers(args: argparse.Namespace) -> int:
    for flower in default_catalog():
        if args.month and not flower.blooms_in(args.month):
            continue
        months = ",".join(str(m) for m in flower.florescence)
        print(f"{flower.id}\t{flower.name}\t{months}")
    return 0


def _cmd_locations(args: argparse.Namespace) -> int:
    campus = _campus()
    if args.month is None:
        names = campus.location_names()
    else:
        names = [loc.name for loc in campus.icon_locations(args.month)]
    for name in names:
        print(name)
    return 0


def _cmd_info(args: argparse.Namespace) -> int:
    flower = default_catalog().by_name(args.name)
    if flower is None:
        print(f"unknown flower: {args.name}", file=sys.stderr)
        return 1
    print(describe_flower(flower))
    print("📍 " + ", ".join(flower.locations))
    return 0


def _cmd_navigate(args: argparse.Namespace) -> int:
    try:
        campus = _campus(args.grid)
    except OSError as exc:
        print(f"cannot read grid: {exc}", file=sys.stderr)
        return 1
    try:
        path = navigate(campus, args.start, args.end, args.avoid, args.month)
    except NavigationError as exc:
        print(exc, file=sys.stderr)
        return 1
    for point in path:
        if args.pixels:
            x, y = to_pixel(point)
            print(f"{x:g},{y:g}")
        else:
            print(f"{int(point[0])},{int(point[1])}")
    return 0


def _cmd_checkin(args: argparse.Namespace) -> int:
    campus = _campus()
    if args.location not in campus.location_names():
        print(f"unknown location: {args.location}", file=sys.stderr)
        return 1
    try:
        day = date.fromisoformat(args.date) if args.date else date.today()
    except ValueError:
        print(f"invalid date: {args.date}", file=sys.stderr)
        return 1
    try:
        image_path = copy_image(args.image, args.app_dir) if args.image else ""
        log_file = Path(args.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        record = CheckinRecord(
            date=format_date(day.year, day.month, day.day),
            location=args.location,
            flower_name=args.flower,
            image_path=image_path,
            log=args.log,
        )
        append_to_log(record, log_file)
    except (CheckinError, OSError) as exc:
        print(f"保存打卡记录失败！ {exc}", file=sys.stderr)
        return 1
    return 0


def _cmd_album(args: argparse.Namespace) -> int:
    album = Album.from_log(args.log_file)
    for record in album.records:
        print(f"{record.date}\t{record.location}\t{record.flower_name}\t"
              f"{record.image_path}\t{record.log}")
    return 0


_COMMANDS = {
    "flowers": _cmd_flowers,
    "locations": _cmd_locations,
    "info": _cmd_info,
    "navigate": _cmd_navigate,
    "checkin": _cmd_checkin,
    "album": _cmd_album,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    args = build_parser().parse_args(argv)
    return _COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())