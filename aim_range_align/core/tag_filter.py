"""
Fiducial allow-list pushed to the vision pipeline
"""
from typing import Iterable, List

from aim_range_align.constants import REEF_TAG_NAMES


class TagFilter:
    """
    Restricts the vision collaborator to a fixed set of fiducial IDs.

    The filter is never reverted: it stays in effect after the command ends
    until some other component overrides it.
    """

    def __init__(self, vision, allowed_ids: Iterable[int], logger):
        self.vision = vision
        self.allowed_ids: List[int] = [int(i) for i in allowed_ids]
        self.logger = logger

    def apply(self):
        self.vision.configure_allowed_ids(list(self.allowed_ids))
        names = [REEF_TAG_NAMES.get(i, f"tag {i}") for i in self.allowed_ids]
        self.logger.debug(f"🏷️  ID filter set: {self.allowed_ids} ({', '.join(names)})")
