"""CSV and YAML parsing for podmatch."""

import csv
import logging
from collections.abc import Collection
from pathlib import Path

import yaml

from podmatch.models import User
from podmatch.normalize import split_field
from podmatch.rules import MatchRules

logger = logging.getLogger(__name__)

ROSTER_COLUMNS = ("name", "email", "zone", "interests", "times", "tags")


def user_id_for_row(index: int) -> str:
    """Synthesized id for the index-th (1-based) roster row, e.g. u-001."""
    return f"u-{index:03d}"


def parse_students_csv(
    csv_path: Path,
    known_zones: Collection[str] | None = None,
    known_timeslots: Collection[str] | None = None,
) -> list[User]:
    """
    Parse the student roster CSV file.

    Expected columns are name, email, zone, interests, times and tags, with
    an optional id column. Missing columns and blank cells become empty
    values. When vocabularies are given, zones and timeslots outside them
    are logged but still accepted.
    """
    users: list[User] = []

    with csv_path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        fieldnames = [name.strip() for name in reader.fieldnames or []]
        reader.fieldnames = fieldnames

        missing = [col for col in ROSTER_COLUMNS if col not in fieldnames]
        if missing:
            logger.warning("%s is missing column(s): %s", csv_path, ", ".join(missing))

        # Skip rows that are entirely blank (e.g. trailing separators)
        rows = [
            row
            for row in reader
            if any((value or "").strip() for value in row.values() if isinstance(value, str))
        ]

    # Synthesized ids must not collide with any id the file supplies
    supplied = {(row.get("id") or "").strip() for row in rows} - {""}
    taken: set[str] = set()

    for index, row in enumerate(rows, start=1):
        user_id = (row.get("id") or "").strip()
        if user_id in taken:
            logger.warning("Duplicate id %r in %s; assigning a new id", user_id, csv_path)
            user_id = ""
        if not user_id:
            number = index
            while user_id_for_row(number) in supplied or user_id_for_row(number) in taken:
                number += 1
            user_id = user_id_for_row(number)
        taken.add(user_id)

        user = User(
            id=user_id,
            name=(row.get("name") or "").strip(),
            email=(row.get("email") or "").strip(),
            zone=(row.get("zone") or "").strip(),
            interests=split_field(row.get("interests")),
            times=split_field(row.get("times")),
            tags=split_field(row.get("tags")),
        )

        if known_zones is not None and user.zone not in known_zones:
            logger.warning("User %s has unrecognized zone %r", user.id, user.zone)
        if known_timeslots is not None:
            for slot in user.times:
                if slot not in known_timeslots:
                    logger.warning("User %s has unrecognized timeslot %r", user.id, slot)

        users.append(user)

    return users


def parse_rules_yaml(yaml_path: Path) -> MatchRules:
    """Parse a matching rules YAML file. An empty file yields the default rules."""
    with yaml_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data or "rules" not in data or data["rules"] is None:
        return MatchRules()

    if not isinstance(data["rules"], dict):
        raise ValueError(f"'rules' in {yaml_path} must be a mapping")

    return MatchRules.from_dict(data["rules"])


def create_rules_template(output_path: Path, rules: MatchRules | None = None):
    """Write a rules YAML file holding the given (or default) rules."""
    template = {"rules": (rules or MatchRules()).to_dict()}

    # Add a comment header
    header = """\
# Matching rules for podmatch
#
# min_pod_size / max_pod_size: bounds on members per pod
# midday_hours: slots at these hours are matched first in each zone
# priority_tag: users with this tag are picked as pod seeds first
# balance_tag / ally_tag: a pod with a balance_tag member but no ally_tag
#   member pulls in one ally_tag user when there is room
# pod_id_prefix: pods are numbered <prefix>-001, <prefix>-002, ...
# carry_leftovers: false drops users left over in a slot for this run,
#   true keeps them eligible for later slots in the same zone

"""

    with output_path.open("w", encoding="utf-8") as f:
        f.write(header)
        yaml.dump(template, f, default_flow_style=False, sort_keys=False)
