"""Humanoid anatomy: bilateral limbs off a chest root, organs contained in
the chest and torso."""
from __future__ import annotations

from ..body_part import BodyPartType
from ..builder import BodyPartBuilder
from ..graph import Mob
from ..tissue import TissueLayerType
from .blueprint import (
    ORGAN_CONNECTIONS,
    Blueprint,
    PartPlacement,
    Placement,
    build_mob,
    limb,
    limb_artery,
    tissue_part,
)

__all__ = ["HUMANOID", "build_humanoid"]

SKIN = TissueLayerType.SKIN
MUSCLE = TissueLayerType.MUSCLE
BONE = TissueLayerType.BONE
FLESH = TissueLayerType.FLESH
ARTERY = TissueLayerType.ARTERY

SYM = Placement.SYM
SYM_BOTH = Placement.SYM_BOTH


def _organ(name: str, *layers) -> BodyPartBuilder:
    return tissue_part(name, *layers).part_type(BodyPartType.ORGAN)


def _teeth(name: str) -> BodyPartBuilder:
    return tissue_part(name, (BONE, 25)).severable(False)


HUMANOID = Blueprint(
    root_key="chest",
    root_template=tissue_part("chest", (BONE, 100), (MUSCLE, 100), (SKIN, 100)).severable(False),
    placements=(
        # head
        PartPlacement("torso", limb_artery("torso", 100), "chest"),
        PartPlacement("neck", limb_artery("neck", 100), "torso"),
        PartPlacement("head", limb_artery("head", 50), "neck"),
        PartPlacement("jaw", limb_artery("jaw", 100), "head"),
        PartPlacement(
            "tongue",
            tissue_part("tongue", (FLESH, 25), (MUSCLE, 25), (ARTERY, 25)).severable(True),
            "head",
        ),
        PartPlacement("upper_teeth", _teeth("upper_teeth"), "head"),
        PartPlacement("lower_teeth", _teeth("lower_teeth"), "jaw"),
        # arms
        PartPlacement("shoulders", limb_artery("shoulder", 100), "chest", mode=SYM),
        PartPlacement("upper_arms", limb_artery("upper_arm", 75), "shoulders", mode=SYM_BOTH),
        PartPlacement("elbows", limb_artery("elbows", 50), "upper_arms", mode=SYM_BOTH),
        PartPlacement("lower_arms", limb_artery("lower_arm", 50), "elbows", mode=SYM_BOTH),
        PartPlacement("hands", limb_artery("hand", 25).can_grab(True), "lower_arms", mode=SYM_BOTH),
        PartPlacement("f_thumbs", limb("f_thumb", 10), "hands", mode=SYM_BOTH),
        PartPlacement("f_indexes", limb("f_index", 10), "hands", mode=SYM_BOTH),
        PartPlacement("f_middles", limb("f_middle", 10), "hands", mode=SYM_BOTH),
        PartPlacement("f_rings", limb("f_ring", 10), "hands", mode=SYM_BOTH),
        PartPlacement("f_pinkies", limb("f_pinky", 10), "hands", mode=SYM_BOTH),
        # legs
        PartPlacement("hips", limb_artery("hip", 100), "torso", mode=SYM),
        PartPlacement("upper_legs", limb_artery("upper_leg", 100), "hips", mode=SYM_BOTH),
        PartPlacement("knees", limb_artery("knee", 75), "upper_legs", mode=SYM_BOTH),
        PartPlacement("lower_legs", limb_artery("lower_leg", 75), "knees", mode=SYM_BOTH),
        PartPlacement("feet", limb_artery("foot", 50), "lower_legs", mode=SYM_BOTH),
        PartPlacement("toes", limb("toes", 50), "feet", mode=SYM_BOTH),
        # organs
        PartPlacement("heart", _organ("heart", (ARTERY, 10)), "chest", ORGAN_CONNECTIONS),
        PartPlacement("lungs", _organ("lung", (FLESH, 10), (ARTERY, 10)), "chest", ORGAN_CONNECTIONS, SYM),
        PartPlacement("stomach", _organ("stomach", (ARTERY, 10)), "torso", ORGAN_CONNECTIONS),
        PartPlacement("liver", _organ("liver", (ARTERY, 10)), "torso", ORGAN_CONNECTIONS),
        PartPlacement("kidneys", _organ("kidney", (ARTERY, 10)), "torso", ORGAN_CONNECTIONS, SYM),
        PartPlacement("intestines", _organ("intestines", (ARTERY, 10)), "torso", ORGAN_CONNECTIONS),
    ),
)


def build_humanoid(name: str) -> Mob:
    return build_mob(name, HUMANOID)
