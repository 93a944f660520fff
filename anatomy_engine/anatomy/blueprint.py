"""
blueprint.py – creature layouts as data.

A ``Blueprint`` is a root template plus an ordered list of ``PartPlacement``
records. ``build_mob`` replays the placements against a fresh ``Mob``; a
placement's ``parent`` names an earlier placement's key (or the root key).
Bilateral placements register a (left, right) pair under their key, and a
``SYM_BOTH`` placement must name such a pair as its parent.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, Tuple, Union

from .. import BlueprintError
from ..body_part import BodyPart
from ..builder import BodyPartBuilder
from ..graph import BodyPartConnection, Mob
from ..graph.mob import NodeHandle
from ..tissue import TissueLayer, TissueLayerType

__all__ = [
    "Placement",
    "PartPlacement",
    "Blueprint",
    "build_mob",
    "LIMB_CONNECTIONS",
    "ORGAN_CONNECTIONS",
    "limb",
    "limb_artery",
    "tissue_part",
]

logger = logging.getLogger(__name__)

LIMB_CONNECTIONS: Tuple[BodyPartConnection, ...] = (
    BodyPartConnection.STRUCTURAL,
    BodyPartConnection.BLOOD_SUPPLY,
)
ORGAN_CONNECTIONS: Tuple[BodyPartConnection, ...] = (
    BodyPartConnection.CONTAINER,
    BodyPartConnection.BLOOD_SUPPLY,
)


class Placement(StrEnum):
    SINGLE = auto()
    SYM = auto()  # left/right copies under one parent
    SYM_BOTH = auto()  # left copy under the left parent, right under the right


def _as_template(template: Union[BodyPartBuilder, BodyPart]) -> BodyPart:
    # templates are frozen as built parts; the mob copies them on insert
    if isinstance(template, BodyPartBuilder):
        return template.build()
    return template.copy()


@dataclass(frozen=True, slots=True)
class PartPlacement:
    key: str
    template: BodyPart
    parent: str
    connections: Tuple[BodyPartConnection, ...] = LIMB_CONNECTIONS
    mode: Placement = Placement.SINGLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "template", _as_template(self.template))


@dataclass(frozen=True, slots=True)
class Blueprint:
    root_key: str
    root_template: BodyPart
    placements: Tuple[PartPlacement, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "root_template", _as_template(self.root_template))


_Placed = Union[NodeHandle, Tuple[NodeHandle, NodeHandle]]


def build_mob(name: str, blueprint: Blueprint) -> Mob:
    """Construct a fresh ``Mob`` from ``blueprint``."""
    mob = Mob(name, blueprint.root_template)
    placed: Dict[str, _Placed] = {blueprint.root_key: mob.root}

    for p in blueprint.placements:
        if p.key in placed:
            raise BlueprintError(f"duplicate placement key {p.key!r}")
        try:
            parent = placed[p.parent]
        except KeyError:
            raise BlueprintError(f"{p.key!r} refers to unknown parent {p.parent!r}") from None

        part = p.template
        if p.mode is Placement.SYM_BOTH:
            if not isinstance(parent, tuple):
                raise BlueprintError(f"{p.key!r} needs a bilateral parent, {p.parent!r} is single")
            placed[p.key] = mob.add_body_part_sym_both(part, parent, p.connections)
            continue
        if isinstance(parent, tuple):
            raise BlueprintError(f"{p.key!r} cannot hang off the bilateral pair {p.parent!r}")
        if p.mode is Placement.SYM:
            placed[p.key] = mob.add_body_part_sym(part, parent, p.connections)
        else:
            placed[p.key] = mob.add_body_part(part, parent, p.connections)

    logger.info("built %s: %d parts, %d connections", name, len(mob), mob.graph.number_of_edges())
    return mob


# ---------------------------------------------------------------------------
# Template helpers
# ---------------------------------------------------------------------------


def tissue_part(name: str, *layers: Tuple[TissueLayerType, int]) -> BodyPartBuilder:
    """Builder with one full-health, uniform-multiplier layer per (type, hp)."""
    builder = BodyPartBuilder(name)
    for layer_type, hp in layers:
        builder.layer(TissueLayer.new(layer_type, hp))
    return builder


def limb(name: str, hp: int) -> BodyPartBuilder:
    return tissue_part(
        name,
        (TissueLayerType.BONE, hp),
        (TissueLayerType.MUSCLE, hp),
        (TissueLayerType.SKIN, hp),
    )


def limb_artery(name: str, hp: int) -> BodyPartBuilder:
    return tissue_part(
        name,
        (TissueLayerType.BONE, hp),
        (TissueLayerType.ARTERY, hp),
        (TissueLayerType.MUSCLE, hp),
        (TissueLayerType.SKIN, hp),
    )

