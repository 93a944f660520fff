from .blueprint import (
    LIMB_CONNECTIONS,
    ORGAN_CONNECTIONS,
    Blueprint,
    PartPlacement,
    Placement,
    build_mob,
    limb,
    limb_artery,
    tissue_part,
)
from .humanoid import HUMANOID, build_humanoid

__all__ = [
    "LIMB_CONNECTIONS",
    "ORGAN_CONNECTIONS",
    "Blueprint",
    "PartPlacement",
    "Placement",
    "build_mob",
    "limb",
    "limb_artery",
    "tissue_part",
    "HUMANOID",
    "build_humanoid",
]
