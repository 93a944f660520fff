"""
damage.py – value types describing a damage event and its outcome.

Exports
-------
• `DamageType` – which distribution rule a hit follows
• `DamageInstance` – one incoming hit (signed amount + type)
• `DamageResult` and its four cases: `TookDamage`, `Destroyed`, `Severed`,
  `NoDamage`
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import ClassVar

__all__ = [
    "DamageType",
    "DamageInstance",
    "Outcome",
    "DamageResult",
    "TookDamage",
    "Destroyed",
    "Severed",
    "NoDamage",
]


class DamageType(StrEnum):
    """Closed set of physical damage kinds."""

    PIERCING = auto()  # hits every layer, never severs
    SLASHING = auto()
    BLUNT = auto()  # spread evenly over every layer

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class DamageInstance:
    amount: int
    damage_type: DamageType

    def __post_init__(self) -> None:
        # accept the plain string value too ("blunt")
        object.__setattr__(self, "damage_type", DamageType(self.damage_type))

    def __str__(self) -> str:
        sign = "+" if self.amount > 0 else ""
        return f"{sign}{self.amount} {self.damage_type.label}"


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


class Outcome(StrEnum):
    TOOK_DAMAGE = auto()
    DESTROYED = auto()
    SEVERED = auto()
    NO_DAMAGE = auto()


@dataclass(frozen=True, slots=True)
class DamageResult:
    """Base of the outcome union; use the subclasses below."""

    kind: ClassVar[Outcome]


@dataclass(frozen=True, slots=True)
class TookDamage(DamageResult):
    """The part survived; carries the instance exactly as it was received."""

    kind: ClassVar[Outcome] = Outcome.TOOK_DAMAGE
    instance: DamageInstance

    def __str__(self) -> str:
        return f"took {self.instance}"


@dataclass(frozen=True, slots=True)
class Destroyed(DamageResult):
    kind: ClassVar[Outcome] = Outcome.DESTROYED

    def __str__(self) -> str:
        return "destroyed"


@dataclass(frozen=True, slots=True)
class Severed(DamageResult):
    kind: ClassVar[Outcome] = Outcome.SEVERED

    def __str__(self) -> str:
        return "severed"


@dataclass(frozen=True, slots=True)
class NoDamage(DamageResult):
    """Defined outcome; the resolution rules never produce it."""

    kind: ClassVar[Outcome] = Outcome.NO_DAMAGE

    def __str__(self) -> str:
        return "no damage"
