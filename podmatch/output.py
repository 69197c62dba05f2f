"""Output formatting for podmatch."""

import csv
import io
import json
from collections import defaultdict
from pathlib import Path

from podmatch.models import MatchResult, Pod, User
from podmatch.vocabulary import format_tag_label


def format_pods_json(pods: list[Pod]) -> str:
    """Serialize pods as a JSON array of plain records."""
    return json.dumps([pod.to_dict() for pod in pods], indent=2, ensure_ascii=False)


def write_pods_json(pods: list[Pod], output_path: Path):
    """Write pods to a UTF-8 JSON file."""
    with output_path.open("w", encoding="utf-8") as f:
        f.write(format_pods_json(pods))
        f.write("\n")


def display_name(user: User) -> str:
    """Name to show for a user: name, else email local part, else id."""
    if user.name:
        return user.name
    if user.email:
        return user.email.split("@")[0]
    return user.id


def format_results(result: MatchResult, users: list[User] | None = None) -> str:
    """Format matching results for display."""
    lines: list[str] = []

    user_by_id: dict[str, User] = {}
    if users:
        user_by_id = {u.id: u for u in users}

    def _name(user_id: str) -> str:
        user = user_by_id.get(user_id)
        return display_name(user) if user else user_id

    if not result.pods:
        lines.append("No pods could be formed.")
        lines.append("Each pod needs enough students sharing a zone and a timeslot.")
    else:
        placed = sum(len(pod.member_ids) for pod in result.pods)
        lines.append("=== Pod Assignments ===")
        lines.append(f"Pods formed: {len(result.pods)}")
        lines.append(f"Students placed: {placed}")
        lines.append("")

        # Group by zone, keeping pod order within each zone
        by_zone: dict[str, list[Pod]] = defaultdict(list)
        for pod in result.pods:
            by_zone[pod.zone].append(pod)

        for zone, zone_pods in by_zone.items():
            lines.append(f"--- {zone or '(no zone)'} ---")
            for pod in zone_pods:
                lines.append(f"  {pod.id} @ {pod.timeslot} ({len(pod.member_ids)} members):")
                if pod.interests:
                    lines.append(f"    Interests: {', '.join(pod.interests)}")
                if pod.tags:
                    labels = ", ".join(format_tag_label(t) for t in pod.tags)
                    lines.append(f"    Tags: {labels}")
                for member_id in pod.member_ids:
                    lines.append(f"    - {_name(member_id)}")
            lines.append("")

    if result.unmatched:
        lines.append(f"=== Unmatched Students ({len(result.unmatched)}) ===")
        for user_id in result.unmatched:
            lines.append(f"  - {_name(user_id)}")
    elif result.pods:
        lines.append("=== Everyone was placed ===")

    return "\n".join(lines)


def format_memberships_csv(pods: list[Pod], users: list[User] | None = None) -> str:
    """Format pod memberships as CSV for export, one row per member."""
    user_by_id = {u.id: u for u in users} if users else {}

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["pod", "zone", "timeslot", "user_id", "name", "email"])

    for pod in pods:
        for member_id in pod.member_ids:
            user = user_by_id.get(member_id)
            writer.writerow(
                [
                    pod.id,
                    pod.zone,
                    pod.timeslot,
                    member_id,
                    user.name if user else "",
                    user.email if user else "",
                ]
            )

    return buffer.getvalue()
