"""Matching rules for podmatch."""

from dataclasses import asdict, dataclass, field, fields

DEFAULT_MIN_POD_SIZE = 5
DEFAULT_MAX_POD_SIZE = 8


@dataclass
class MatchRules:
    """Knobs for the pod matcher. The defaults reproduce the standard behavior."""

    min_pod_size: int = DEFAULT_MIN_POD_SIZE
    max_pod_size: int = DEFAULT_MAX_POD_SIZE
    # Slots whose hour falls in this set are processed first in each zone
    midday_hours: list[int] = field(default_factory=lambda: [11, 12, 13])
    # Users with this tag are seeded first within a slot
    priority_tag: str = "commuter"
    # A pod with a balance_tag member but no ally_tag member pulls in one ally
    balance_tag: str = "international"
    ally_tag: str = "language_ally"
    pod_id_prefix: str = "pod"
    # False: users left over in a slot are not placed anywhere this run.
    # True: they stay eligible for the zone's later slots.
    carry_leftovers: bool = False

    def __post_init__(self):
        if self.min_pod_size < 1:
            raise ValueError(f"min_pod_size must be at least 1, got {self.min_pod_size}")
        if self.max_pod_size < self.min_pod_size:
            raise ValueError(
                f"max_pod_size ({self.max_pod_size}) must not be smaller than "
                f"min_pod_size ({self.min_pod_size})"
            )
        self.midday_hours = [int(h) for h in self.midday_hours]

    @classmethod
    def from_dict(cls, data: dict) -> "MatchRules":
        """Build rules from a mapping, rejecting keys that are not rule names."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown rule(s): {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict:
        return asdict(self)
