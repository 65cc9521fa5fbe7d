#!/usr/bin/env python3
"""Render a JSON file of price records to an SVG chart."""

import argparse
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from refchart.chart import ReferenceChart
from refchart.config.loader import ConfigLoader
from refchart.config.validation import ConfigValidator
from refchart.data.parsers import ParseError, extract_records, parse_json_payload
from refchart.logging import configure_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", type=Path, help="JSON file with {timestamp, price} records")
    parser.add_argument("-o", "--output", type=Path, default=Path("chart.svg"))
    parser.add_argument("-r", "--reference", type=float, default=None,
                        help="Reference price (defaults to the configured one)")
    parser.add_argument("-p", "--profile", default=None,
                        help="Profile name from config/chart.yaml")
    parser.add_argument("--hover", type=float, default=None,
                        help="Draw the hover overlay for a pointer at this SVG x")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--json-logs", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main rendering function."""
    args = parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.json_logs)

    loader = ConfigLoader.create()
    merged = loader.merge_config(args.profile)
    errors = ConfigValidator.validate_config(merged)
    if errors:
        print(f"❌ Found {len(errors)} configuration errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        return 1

    try:
        records = extract_records(parse_json_payload(args.input.read_bytes()))
    except (OSError, ParseError) as e:
        print(f"❌ Could not read {args.input}: {e}")
        return 1

    chart = ReferenceChart(loader.load(args.profile))
    if chart.render(records, reference=args.reference) is None:
        print("❌ Nothing rendered, see log output")
        return 1

    if args.hover is not None:
        chart.pointer_move(args.hover)

    args.output.write_text(chart.to_svg())
    print(f"✅ Wrote {args.output} ({len(chart.segments)} segments)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
