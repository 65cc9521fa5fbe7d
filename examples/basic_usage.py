#!/usr/bin/env python3
"""
Basic Usage Example - Reference Threshold Chart

This script demonstrates the basic usage of the reference chart with a
small daily price series. It shows how to:
- Render a series against a reference price
- Inspect the gain/loss segments and crossing points
- Simulate pointer movement and read the tooltip
- Write the chart as SVG

Run: python examples/basic_usage.py
"""

from pathlib import Path

from refchart.chart import ReferenceChart
from refchart.logging import configure_logging

SAMPLE_RECORDS = [
    {"timestamp": "2024-05-01T00:00:00Z", "price": 100},
    {"timestamp": "2024-05-02T00:00:00Z", "price": 105},
    {"timestamp": "2024-05-03T00:00:00Z", "price": 102},
    {"timestamp": "2024-05-04T00:00:00Z", "price": 108},
    {"timestamp": "2024-05-05T00:00:00Z", "price": 110},
    {"timestamp": "2024-05-06T00:00:00Z", "price": 108},
    {"timestamp": "2024-05-07T00:00:00Z", "price": 99},
    {"timestamp": "2024-05-08T00:00:00Z", "price": 115},
]


def main():
    configure_logging(level="INFO")

    chart = ReferenceChart()
    frame = chart.render(SAMPLE_RECORDS, reference=105)

    print(f"Segments: {len(frame.segments)}")
    for segment in frame.segments:
        crossings = [p.ts.isoformat() for p in segment.points if p.synthetic]
        print(f"  {segment.side.value:5s} {len(segment)} points, crossings: {crossings}")

    for pointer_x in (100, 300, 500, 700):
        overlay = chart.pointer_move(pointer_x)
        if overlay is not None:
            print(f"  pointer x={pointer_x}: {overlay.tooltip_text} ({overlay.side.value})")

    output = Path("basic_usage.svg")
    output.write_text(chart.to_svg())
    print(f"Wrote {output}")


if __name__ == "__main__":
    main()
