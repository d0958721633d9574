"""Classification dimensions and their label sets."""

from enum import Enum


class Dimension(str, Enum):
    """An independent classification axis.

    - intent: informational / navigational / transactional (Broder 2002)
    - status: reading-list style workflow state (Tabs.do 2021)
    - contentType: what kind of page the tab shows (WWW 2010)
    """

    INTENT = "intent"
    STATUS = "status"
    CONTENT_TYPE = "contentType"

    @property
    def labels(self) -> tuple[str, ...]:
        return DIMENSION_LABELS[self]


DIMENSION_LABELS: dict[Dimension, tuple[str, ...]] = {
    Dimension.INTENT: ("informational", "navigational", "transactional"),
    Dimension.STATUS: ("to-read", "to-do", "reference", "maybe", "done"),
    Dimension.CONTENT_TYPE: ("content", "communication", "search"),
}

DIMENSIONS: tuple[Dimension, ...] = tuple(Dimension)
