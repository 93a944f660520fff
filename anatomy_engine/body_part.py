# ================================================================
#  body_part.py – layered body part and damage resolution
# ================================================================
"""
A body part is an ordered stack of tissue layers. Layer order is the
order the slashing rule walks, so it is fixed once the part is built.

Resolution rules (``BodyPart.take_damage``)
-------------------------------------------
• Piercing – every layer takes ``amount * multiplier``.
• Slashing – layer *i* is hit only when no layer from *i* to the end of
  the stack (itself included) had hit points before the call.
• Blunt    – ``amount * multiplier / layer_count`` lands on every layer.

Deltas truncate toward zero and are added to ``layer.hp`` with their sign.
If the summed magnitude exceeds the part's hit points before the call the
part is severed (severable part, non-piercing hit) or destroyed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import List

from . import EmptyBodyPartError
from .damage import (
    DamageInstance,
    DamageResult,
    DamageType,
    Destroyed,
    Severed,
    TookDamage,
)
from .tissue import TissueLayer

__all__ = ["BodyPartType", "BodyPart"]

logger = logging.getLogger(__name__)


class BodyPartType(StrEnum):
    LIMB = auto()
    ORGAN = auto()


@dataclass(slots=True)
class BodyPart:
    name: str = "unnamed_bodypart"
    part_type: BodyPartType = BodyPartType.LIMB
    layers: List[TissueLayer] = field(default_factory=list)
    severable: bool = True
    can_grab: bool = False

    def __str__(self) -> str:
        return f"{self.name}: {self.hp()}/{self.max_hp()} -- {len(self.layers)} layers"

    # aggregates --------------------------------------------------------------

    def hp(self) -> int:
        return sum(layer.hp for layer in self.layers)

    def max_hp(self) -> int:
        return sum(layer.max_hp for layer in self.layers)

    def hp_avg(self) -> int:
        return self.hp() // self._layer_count()

    def max_hp_avg(self) -> int:
        return self.max_hp() // self._layer_count()

    def _layer_count(self) -> int:
        if not self.layers:
            raise EmptyBodyPartError(f"body part {self.name!r} has no layers")
        return len(self.layers)

    def copy(self, name: str | None = None) -> BodyPart:
        """Independent copy; layers are duplicated, not shared."""
        return BodyPart(
            name=self.name if name is None else name,
            part_type=self.part_type,
            layers=[layer.copy() for layer in self.layers],
            severable=self.severable,
            can_grab=self.can_grab,
        )

    # resolution --------------------------------------------------------------

    def take_damage(self, damage: DamageInstance) -> DamageResult:
        """Apply ``damage`` to the layers in place and classify the outcome."""
        total_hp = self.hp()
        dtype = damage.damage_type

        if dtype is DamageType.PIERCING:
            deltas = [int(damage.amount * layer.multiplier(dtype)) for layer in self.layers]
        elif dtype is DamageType.SLASHING:
            before = [layer.hp for layer in self.layers]
            deltas = [
                0 if any(hp > 0 for hp in before[i:]) else int(damage.amount * layer.multiplier(dtype))
                for i, layer in enumerate(self.layers)
            ]
        elif dtype is DamageType.BLUNT:
            count = self._layer_count()
            deltas = [int(damage.amount * layer.multiplier(dtype) / count) for layer in self.layers]
        else:  # pragma: no cover – closed enum
            raise TypeError(f"unsupported damage type {dtype!r}")

        total_damage = 0
        for layer, delta in zip(self.layers, deltas):
            total_damage += delta
            # hit points are unsigned
            layer.hp = max(0, layer.hp + delta)

        result: DamageResult
        if abs(total_damage) > total_hp:
            if self.severable and dtype is not DamageType.PIERCING:
                result = Severed()
            else:
                result = Destroyed()
        else:
            result = TookDamage(damage)

        logger.debug(
            "%s <- %s: deltas=%s total=%d (hp before %d) => %s",
            self.name, damage, deltas, total_damage, total_hp, result,
        )
        return result
