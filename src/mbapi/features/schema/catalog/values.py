"""Summary: Enumerated property values with their MusicBrainz database ids.
Why: Status and type filters of lookups accept these names in lower case.
"""

from __future__ import annotations

from typing import Final

ARTIST_TYPE_IDS: Final[dict[str, int]] = {
    "Person": 1,
    "Group": 2,
    "Choir": 6,
    "Orchestra": 5,
    "Character": 4,
    "Other": 3,
}

GENDER_IDS: Final[dict[str, int]] = {
    "Male": 1,
    "Female": 2,
    "Non-binary": 5,
    "Not applicable": 4,
    "Other": 3,
}

RELEASE_STATUS_IDS: Final[dict[str, int]] = {
    "Official": 1,
    "Promotion": 2,
    "Bootleg": 3,
    "Pseudo-Release": 4,
    "Withdrawn": 5,
    "Cancelled": 6,
}

RELEASE_PACKAGING_IDS: Final[dict[str, int]] = {
    "Book": 9,
    "Box": 19,
    "Cardboard/Paper Sleeve": 4,
    "Cassette Case": 8,
    "Clamshell Case": 56,
    "Digibook": 17,
    "Digifile": 89,
    "Digipak": 3,
    "Discbox Slider": 13,
    "Fatbox": 10,
    "Gatefold Cover": 12,
    "Jewel Case": 1,
    "Keep Case": 6,
    "Longbox": 55,
    "Metal Tin": 54,
    "Plastic Sleeve": 18,
    "Slidepack": 20,
    "Slim Jewel Case": 2,
    "Snap Case": 11,
    "SnapPack": 21,
    "Super Jewel Box": 16,
    "Other": 5,
    "None": 7,
}

RELEASE_GROUP_PRIMARY_TYPE_IDS: Final[dict[str, int]] = {
    "Album": 1,
    "Single": 2,
    "EP": 3,
    "Broadcast": 12,
    "Other": 11,
}

RELEASE_GROUP_SECONDARY_TYPE_IDS: Final[dict[str, int]] = {
    "Audio drama": 11,
    "Audiobook": 5,
    "Compilation": 1,
    "Demo": 10,
    "DJ-mix": 8,
    "Field recording": 12,
    "Interview": 4,
    "Live": 6,
    "Mixtape/Street": 9,
    "Remix": 7,
    "Soundtrack": 2,
    "Spokenword": 3,
}

DATA_QUALITIES: Final[tuple[str, ...]] = ("low", "normal", "high")


def release_statuses() -> frozenset[str]:
    """Lower-cased status names accepted by the ``status`` lookup filter."""

    return frozenset(name.lower() for name in RELEASE_STATUS_IDS)


def release_group_types() -> frozenset[str]:
    """Lower-cased primary and secondary type names accepted by the ``type`` filter."""

    names = [*RELEASE_GROUP_PRIMARY_TYPE_IDS, *RELEASE_GROUP_SECONDARY_TYPE_IDS]
    return frozenset(name.lower() for name in names)


__all__ = [
    "ARTIST_TYPE_IDS",
    "DATA_QUALITIES",
    "GENDER_IDS",
    "RELEASE_GROUP_PRIMARY_TYPE_IDS",
    "RELEASE_GROUP_SECONDARY_TYPE_IDS",
    "RELEASE_PACKAGING_IDS",
    "RELEASE_STATUS_IDS",
    "release_group_types",
    "release_statuses",
]
