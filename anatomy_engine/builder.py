"""Fluent, validating constructor for ``BodyPart`` templates."""
from __future__ import annotations

from . import BuilderError
from .body_part import BodyPart, BodyPartType
from .tissue import TissueLayer

__all__ = ["BodyPartBuilder", "BuilderError"]


class BodyPartBuilder:
    """Accumulates layers and flags; ``build`` refuses a part with no layers.

    >>> leg = BodyPartBuilder("leg").layer(TissueLayer()).severable(True).build()
    """

    __slots__ = ("_part",)

    def __init__(self, name: str) -> None:
        self._part = BodyPart(name=name)

    @property
    def name(self) -> str:
        return self._part.name

    @property
    def layer_count(self) -> int:
        return len(self._part.layers)

    def layer(self, layer: TissueLayer) -> BodyPartBuilder:
        self._part.layers.append(layer)
        return self

    def severable(self, severable: bool) -> BodyPartBuilder:
        self._part.severable = severable
        return self

    def can_grab(self, can_grab: bool) -> BodyPartBuilder:
        self._part.can_grab = can_grab
        return self

    def part_type(self, part_type: BodyPartType) -> BodyPartBuilder:
        self._part.part_type = part_type
        return self

    def build(self) -> BodyPart:
        if not self._part.layers:
            raise BuilderError()
        return self._part.copy()
