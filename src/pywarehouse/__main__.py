"""Main entry point for pywarehouse."""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from pywarehouse.errors import PywarehouseError, validate_positive
from pywarehouse.layout.checks import check_layout
from pywarehouse.layout.engine import LayoutConfig, LayoutEngine
from pywarehouse.layout.position import Placement
from pywarehouse.model.inventory import VOLUME_CONVERSION_FACTOR, category_distribution, read_inventory
from pywarehouse.model.warehouse import WarehouseBounds, WarehouseUsage, usage_for

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="pywarehouse",
        description="Warehouse occupancy layout - arrange stored material categories as 3D boxes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "inventory",
        type=Path,
        help="JSON file: {category: volume} or a list of {category, weight, date} records",
    )
    parser.add_argument("--length", type=float, default=10.0, help="Warehouse length in metres (default: 10)")
    parser.add_argument("--width", type=float, default=10.0, help="Warehouse width in metres (default: 10)")
    parser.add_argument("--height", type=float, default=2.0, help="Warehouse height in metres (default: 2)")
    parser.add_argument(
        "--weights",
        action="store_true",
        help="Read a plain {category: number} file as kilograms instead of cubic metres",
    )
    parser.add_argument(
        "--factor",
        type=float,
        default=VOLUME_CONVERSION_FACTOR,
        help=f"Cubic metres per kilogram for weight inputs (default: {VOLUME_CONVERSION_FACTOR})",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--view",
        action="store_true",
        help="Open the 3D viewer (requires PyQt6 and PyOpenGL)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def format_table(
    placements: list[Placement],
    usage: WarehouseUsage,
    volumes: dict[str, float],
    oldest: dict[str, datetime] | None = None,
) -> str:
    """Render usage, any storage alert and the placements as plain text."""
    lines = [f"Usage: {usage.percent:.1f}% ({usage.current_storage:.1f} / {usage.capacity:.1f} m³) [{usage.level.value}]"]
    alert = usage.alert
    if alert:
        lines.append(f"{alert.level.value.upper()}: {alert.title}. {alert.message}")
        lines.extend(f"  - {suggestion}" for suggestion in alert.suggestions)
    if not placements:
        lines.append("Nothing to place")
        return "\n".join(lines)

    lines.append("")
    lines.append(f"{'category':<20} {'volume':>8} {'share':>7} {'oldest':>10}  center (x, y, z) / size (l, h, w)")
    shares = {row.category: row for row in category_distribution(volumes, oldest)}
    for p in placements:
        share = shares.get(p.category)
        percent = share.percent if share else 0.0
        since = f"{share.oldest:%Y-%m-%d}" if share and share.oldest else "-"
        center = ", ".join(f"{v:.2f}" for v in p.center)
        size = ", ".join(f"{v:.2f}" for v in p.extent)
        lines.append(f"{p.category:<20} {p.volume:>8.2f} {percent:>6.1f}% {since:>10}  ({center}) / ({size})")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        factor = validate_positive(args.factor, "factor")
        bounds = WarehouseBounds.from_dict({"length": args.length, "width": args.width, "height": args.height})
        inventory = read_inventory(args.inventory, weights=args.weights, factor=factor)
    except PywarehouseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    volumes = inventory.volumes
    config = LayoutConfig()
    placements = LayoutEngine(config).compute_placements(volumes, bounds)
    usage = usage_for(bounds, volumes)

    report = check_layout(placements, bounds, config)
    if not report.ok:
        logger.warning(
            f"Layout exceeds the usable interior: {len(report.out_of_bounds)} out of bounds, "
            f"{len(report.overlaps)} overlapping"
        )

    if args.format == "json":
        payload = {
            "bounds": bounds.to_dict(),
            "usage": usage.to_dict(),
            "placements": [p.to_dict() for p in placements],
            "oldest_batches": {category: date.isoformat() for category, date in inventory.oldest.items()},
        }
        print(json.dumps(payload, indent=2))
    else:
        print(format_table(placements, usage, volumes, inventory.oldest))

    if args.view:
        try:
            from pywarehouse.view.viewer import show_viewer
            return show_viewer(
                placements,
                bounds,
                title=f"pywarehouse - {args.inventory.name}",
                factor=factor,
                oldest=inventory.oldest,
            )
        except PywarehouseError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
