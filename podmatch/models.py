"""Data models for podmatch."""

from dataclasses import dataclass, field


@dataclass
class User:
    """A student registration as seen by the matcher."""

    id: str
    zone: str = ""
    interests: list[str] = field(default_factory=list)
    times: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    name: str = ""
    email: str = ""

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def shares_interest(self, other: "User") -> bool:
        """True if the two users have at least one interest token in common."""
        return any(interest in other.interests for interest in self.interests)


@dataclass
class Pod:
    """A group of students meeting in one zone at one timeslot."""

    id: str
    zone: str
    timeslot: str
    interests: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    member_ids: list[str] = field(default_factory=list)  # seed first
    # Gamification state, owned by whoever consumes the pods
    points: int = 0
    level: int = 1
    vibe: int = 0

    def to_dict(self) -> dict:
        """Plain record with the key names the pods JSON file uses."""
        return {
            "id": self.id,
            "zone": self.zone,
            "timeslot": self.timeslot,
            "interests": list(self.interests),
            "tags": list(self.tags),
            "memberIds": list(self.member_ids),
            "points": self.points,
            "level": self.level,
            "vibe": self.vibe,
        }


@dataclass
class MatchResult:
    """Result of a matching run."""

    pods: list[Pod]
    unmatched: list[str] = field(default_factory=list)  # user ids, input order
