"""
tissue.py – a single damageable stratum of a body part.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Dict, Iterator, Mapping, Tuple

from . import MultiplierTableError
from .damage import DamageType

__all__ = ["TissueLayerType", "DamageMultipliers", "TissueLayer"]

_DAMAGE_TYPES: Tuple[DamageType, ...] = tuple(DamageType)
_SLOTS: Dict[DamageType, int] = {dt: i for i, dt in enumerate(_DAMAGE_TYPES)}


class TissueLayerType(StrEnum):
    SKIN = auto()
    MUSCLE = auto()
    BONE = auto()
    FLESH = auto()
    ARTERY = auto()


class DamageMultipliers(Mapping[DamageType, float]):
    """Vulnerability profile with exactly one entry per ``DamageType``.

    Values live in a tuple indexed by the damage type's declaration order,
    so a complete table is checked once here and never again on lookup.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[DamageType, float]) -> None:
        missing = [dt for dt in _DAMAGE_TYPES if dt not in values]
        if missing:
            names = ", ".join(dt.label for dt in missing)
            raise MultiplierTableError(f"no multiplier for: {names}")
        extra = set(values) - set(_DAMAGE_TYPES)
        if extra:
            raise MultiplierTableError(f"unknown damage types: {sorted(map(str, extra))}")
        self._values: Tuple[float, ...] = tuple(float(values[dt]) for dt in _DAMAGE_TYPES)

    @classmethod
    def uniform(cls, value: float = 1.0) -> DamageMultipliers:
        return cls({dt: value for dt in _DAMAGE_TYPES})

    def __getitem__(self, damage_type: DamageType) -> float:
        return self._values[_SLOTS[damage_type]]

    def __iter__(self) -> Iterator[DamageType]:
        return iter(_DAMAGE_TYPES)

    def __len__(self) -> int:
        return len(_DAMAGE_TYPES)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DamageMultipliers):
            return self._values == other._values
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        body = ", ".join(f"{dt.label}={v:g}" for dt, v in zip(_DAMAGE_TYPES, self._values))
        return f"DamageMultipliers({body})"


@dataclass(slots=True)
class TissueLayer:
    """Hit-point pool plus per-damage-type multipliers.

    ``hp`` starts at ``max_hp`` unless given explicitly.
    """

    layer_type: TissueLayerType = TissueLayerType.SKIN
    max_hp: int = 100
    hp: int | None = None
    damage_multipliers: DamageMultipliers = field(default_factory=DamageMultipliers.uniform)

    def __post_init__(self) -> None:
        if self.hp is None:
            self.hp = self.max_hp
        if self.max_hp < 0 or self.hp < 0:
            raise ValueError(f"hit points must be non-negative, got {self.hp}/{self.max_hp}")
        if not isinstance(self.damage_multipliers, DamageMultipliers):
            self.damage_multipliers = DamageMultipliers(self.damage_multipliers)

    @classmethod
    def new(
        cls,
        layer_type: TissueLayerType,
        max_hp: int,
        multipliers: Mapping[DamageType, float] | None = None,
    ) -> TissueLayer:
        """Fresh layer at full health."""
        if multipliers is None:
            return cls(layer_type, max_hp)
        return cls(layer_type, max_hp, damage_multipliers=DamageMultipliers(multipliers))

    def multiplier(self, damage_type: DamageType) -> float:
        return self.damage_multipliers[damage_type]

    def copy(self) -> TissueLayer:
        # multiplier tables are immutable and may be shared
        return TissueLayer(self.layer_type, self.max_hp, self.hp, self.damage_multipliers)
