"""Zone, timeslot and tag vocabularies offered by the sign-up form."""

ZONES: tuple[str, ...] = ("Tempe", "West", "Poly", "DTPHX")

TIMESLOTS: tuple[str, ...] = (
    "Mon 10:00",
    "Mon 14:00",
    "Tue 11:30",
    "Tue 14:00",
    "Tue 15:00",
    "Wed 12:30",
    "Wed 16:00",
    "Thu 17:00",
    "Fri 15:00",
    "Sat 13:00",
    "Sun 10:00",
)

# tag value -> display label
TAG_OPTIONS: dict[str, str] = {
    "mixed_identities": "Mixed Identities",
    "minority_group": "Minority Groups",
    "out_of_state": "Out-of-State Students",
    "non_traditional": "Non-traditional Students",
    "language": "Language (ESL / multilingual)",
    "disability": "Disability",
    "age": "Age",
    "finance_work": "Finance / Work",
    "commuter": "Commuter",
    "international": "International",
    "first_gen": "First-Gen",
    "sensory": "Sensory Needs",
    "mobility": "Mobility Needs",
    "language_ally": "Language Ally",
}

CUSTOM_TAG_PREFIX = "other:"


def format_tag_label(value: str, options: dict[str, str] = TAG_OPTIONS) -> str:
    """
    Return the display label for a tag value.

    Free-text tags entered as "other:<text>" render as "Other: <text>".
    Unknown values are returned unchanged.
    """
    if value.startswith(CUSTOM_TAG_PREFIX):
        custom = value[len(CUSTOM_TAG_PREFIX) :].strip()
        return f"Other: {custom}" if custom else "Other"
    return options.get(value, value)
