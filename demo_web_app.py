#!/usr/bin/env python3
"""
Demo: Run the shared utilities (sum, capitalize, kebab_case, chunk, unique)
over sample inputs and print the results.

Usage:
    python demo_web_app.py
    python demo_web_app.py --config demo.yaml --export report.yaml
"""

import argparse
import logging
import sys

from monoutils.config import DemoConfig, load_config
from monoutils.demo import run_demo, format_report
from monoutils.errors import UtilsError
from monoutils.serialization import report_to_json, report_to_yaml


def main(argv=None):
    parser = argparse.ArgumentParser(description="Shared utilities demo")
    parser.add_argument("--config", help="YAML file overriding the sample inputs")
    parser.add_argument("--export", help="Write the results to a .json or .yaml file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else DemoConfig()
        report = run_demo(config)
    except UtilsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_report(report))

    if args.export:
        if args.export.endswith((".yaml", ".yml")):
            content = report_to_yaml(report)
        else:
            content = report_to_json(report)
        try:
            with open(args.export, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            print(f"Error: cannot write {args.export}: {e}", file=sys.stderr)
            return 1
        print(f"\n✅ Results exported to {args.export}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
