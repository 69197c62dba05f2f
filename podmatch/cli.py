"""Command-line interface for podmatch."""

import argparse
import csv
import logging
import sys
from dataclasses import replace
from pathlib import Path

import yaml

from podmatch.matcher import run_matching
from podmatch.output import format_memberships_csv, format_results, write_pods_json
from podmatch.parser import create_rules_template, parse_rules_yaml, parse_students_csv
from podmatch.rules import MatchRules
from podmatch.vocabulary import TIMESLOTS, ZONES


def main(argv: list[str] | None = None) -> int:
    """Main entry point for podmatch CLI."""
    parser = argparse.ArgumentParser(
        description="Group students into pods by zone, timeslot and shared interests.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  podmatch students.csv
  podmatch students.csv -o public/data/pods.json --csv memberships.csv
  podmatch students.csv --rules rules.yaml --max-pod-size 6
  podmatch --write-rules-template rules.yaml
""",
    )
    parser.add_argument(
        "students_csv",
        type=Path,
        nargs="?",
        help="Path to the CSV file with student registrations",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("pods.json"),
        help="Path for the pods JSON file (default: pods.json)",
    )
    parser.add_argument(
        "--rules",
        type=Path,
        help="Path to a matching rules YAML file",
    )
    parser.add_argument(
        "--min-pod-size",
        type=int,
        help="Minimum students per pod (default: 5)",
    )
    parser.add_argument(
        "--max-pod-size",
        type=int,
        help="Maximum students per pod (default: 8)",
    )
    parser.add_argument(
        "--carry-leftovers",
        action="store_true",
        help="Keep students left over in one slot eligible for later slots",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        dest="memberships_csv",
        help="Also write pod memberships to this CSV file",
    )
    parser.add_argument(
        "--write-rules-template",
        type=Path,
        help="Write a rules YAML file with the default rules and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log matching details",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.write_rules_template:
        create_rules_template(args.write_rules_template)
        print(f"Created rules template at: {args.write_rules_template}")
        return 0

    if args.students_csv is None:
        parser.error("the students_csv argument is required")

    # Validate students CSV exists
    if not args.students_csv.exists():
        print(f"Error: Students file not found: {args.students_csv}", file=sys.stderr)
        return 1

    # Load rules, then apply command-line overrides
    rules = MatchRules()
    if args.rules:
        if not args.rules.exists():
            print(f"Error: Rules file not found: {args.rules}", file=sys.stderr)
            return 1
        try:
            rules = parse_rules_yaml(args.rules)
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            print(f"Error parsing rules YAML: {e}", file=sys.stderr)
            return 1

    overrides: dict = {}
    if args.min_pod_size is not None:
        overrides["min_pod_size"] = args.min_pod_size
    if args.max_pod_size is not None:
        overrides["max_pod_size"] = args.max_pod_size
    if args.carry_leftovers:
        overrides["carry_leftovers"] = True
    try:
        rules = replace(rules, **overrides)
    except ValueError as e:
        print(f"Error: Invalid rules: {e}", file=sys.stderr)
        return 1

    # Parse students
    try:
        users = parse_students_csv(args.students_csv, known_zones=ZONES, known_timeslots=TIMESLOTS)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        print(f"Error parsing students CSV: {e}", file=sys.stderr)
        return 1

    print(f"Loaded {len(users)} students")

    result = run_matching(users, rules)

    try:
        write_pods_json(result.pods, args.output)
        if args.memberships_csv:
            args.memberships_csv.write_text(
                format_memberships_csv(result.pods, users), encoding="utf-8"
            )
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    # Output results
    print(f"Generated {len(result.pods)} pods at {args.output}")
    if args.memberships_csv:
        print(f"Wrote memberships to {args.memberships_csv}")
    print()
    print(format_results(result, users))

    return 0


if __name__ == "__main__":
    sys.exit(main())
