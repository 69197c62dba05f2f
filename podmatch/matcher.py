"""Greedy pod matching for podmatch."""

import logging

from podmatch.models import MatchResult, Pod, User
from podmatch.normalize import is_midday, unique_in_order
from podmatch.rules import MatchRules

logger = logging.getLogger(__name__)


def _pod_id(prefix: str, number: int) -> str:
    return f"{prefix}-{number:03d}"


def _group_by_zone(users: list[User]) -> dict[str, list[User]]:
    """Bucket users by zone, keeping first-seen zone order and input order."""
    by_zone: dict[str, list[User]] = {}
    for user in users:
        by_zone.setdefault(user.zone, []).append(user)
    return by_zone


def _ordered_timeslots(zone_users: list[User], rules: MatchRules) -> list[str]:
    """Distinct timeslots referenced in a zone, midday slots first."""
    slots = unique_in_order(slot for user in zone_users for slot in user.times)
    # sorted() is stable, so first-seen order holds within each tier
    return sorted(slots, key=lambda slot: not is_midday(slot, rules.midday_hours))


def _form_pod(candidates: list[User], rules: MatchRules) -> list[User]:
    """
    Take one pod's worth of members out of the candidate list.

    The caller guarantees at least min_pod_size candidates. The list is
    mutated in place: every member returned has been removed from it.
    """
    seed = candidates.pop(0)
    members = [seed]

    # Pull in anyone sharing an interest with the seed, scanning from the back
    for i in range(len(candidates) - 1, -1, -1):
        if len(members) >= rules.max_pod_size:
            break
        if candidates[i].shares_interest(seed):
            members.append(candidates.pop(i))

    # Pair a balance_tag member with an ally if the pod has none yet
    has_balance = any(m.has_tag(rules.balance_tag) for m in members)
    has_ally = any(m.has_tag(rules.ally_tag) for m in members)
    if has_balance and not has_ally and len(members) < rules.max_pod_size:
        for i, candidate in enumerate(candidates):
            if candidate.has_tag(rules.ally_tag):
                members.append(candidates.pop(i))
                break

    # Top up to the minimum size regardless of interests
    while len(members) < rules.min_pod_size and candidates:
        members.append(candidates.pop(0))

    return members


def run_matching(users: list[User], rules: MatchRules | None = None) -> MatchResult:
    """
    Group users into pods sharing a zone and a timeslot.

    Zones are processed in first-seen order and never mixed. Within a zone,
    midday slots are matched before the others, and within a slot users
    carrying the priority tag are seeded first. Each pod is grown from its
    seed by shared interest, balanced with an ally when needed and topped up
    to the minimum size. A user is placed at most once per run; users who
    end up in a slot's remainder (fewer than min_pod_size left) are
    reported as unmatched.
    """
    rules = rules or MatchRules()
    pods: list[Pod] = []
    removed: set[str] = set()  # placed, or dropped as leftovers

    for zone, zone_users in _group_by_zone(users).items():
        for slot in _ordered_timeslots(zone_users, rules):
            candidates = [u for u in zone_users if u.id not in removed and slot in u.times]
            candidates.sort(key=lambda u: not u.has_tag(rules.priority_tag))

            while len(candidates) >= rules.min_pod_size:
                members = _form_pod(candidates, rules)
                pod = Pod(
                    id=_pod_id(rules.pod_id_prefix, len(pods) + 1),
                    zone=zone,
                    timeslot=slot,
                    interests=unique_in_order(i for m in members for i in m.interests),
                    tags=unique_in_order(t for m in members for t in m.tags),
                    member_ids=[m.id for m in members],
                )
                pods.append(pod)
                removed.update(pod.member_ids)
                logger.debug(
                    "Formed %s in %s at %s with %d members", pod.id, zone, slot, len(members)
                )

            if candidates and not rules.carry_leftovers:
                logger.info(
                    "Dropping %d leftover user(s) in %s at %s: %s",
                    len(candidates),
                    zone,
                    slot,
                    ", ".join(u.id for u in candidates),
                )
                removed.update(u.id for u in candidates)

    placed = {member_id for pod in pods for member_id in pod.member_ids}
    unmatched = [u.id for u in users if u.id not in placed]

    return MatchResult(pods=pods, unmatched=unmatched)


def match_pods(users: list[User], rules: MatchRules | None = None) -> list[Pod]:
    """Match users into pods. See run_matching for the grouping rules."""
    return run_matching(users, rules).pods
