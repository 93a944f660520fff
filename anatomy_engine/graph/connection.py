from __future__ import annotations

from enum import StrEnum, auto
from typing import FrozenSet

__all__ = ["BodyPartConnection", "DISPLAY_CONNECTIONS"]


class BodyPartConnection(StrEnum):
    """Edge label: what relation a parent → child edge stands for."""

    STRUCTURAL = auto()
    BLOOD_SUPPLY = auto()
    CONTAINER = auto()


# Edges followed when rendering a creature's anatomy.
DISPLAY_CONNECTIONS: FrozenSet[BodyPartConnection] = frozenset(
    {BodyPartConnection.STRUCTURAL, BodyPartConnection.CONTAINER}
)
