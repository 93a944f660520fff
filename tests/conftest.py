# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add repo root (parent of this file) to import search path
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from anatomy_engine import BodyPartBuilder, DamageType, TissueLayer, TissueLayerType  # noqa: E402
from anatomy_engine.anatomy import build_humanoid  # noqa: E402


@pytest.fixture
def leg_builder():
    """Three full-health layers of 100 hp with uniform multipliers."""
    return (
        BodyPartBuilder("leg")
        .layer(TissueLayer.new(TissueLayerType.BONE, 100))
        .layer(TissueLayer.new(TissueLayerType.MUSCLE, 100))
        .layer(TissueLayer.new(TissueLayerType.SKIN, 100))
        .severable(True)
    )


@pytest.fixture
def leg(leg_builder):
    return leg_builder.build()


@pytest.fixture
def mixed_leg():
    return (
        BodyPartBuilder("Leg")
        .layer(TissueLayer.new(TissueLayerType.BONE, 100, {
            DamageType.PIERCING: 0.5, DamageType.SLASHING: 0.6, DamageType.BLUNT: 2.0,
        }))
        .layer(TissueLayer.new(TissueLayerType.MUSCLE, 100))
        .layer(TissueLayer.new(TissueLayerType.SKIN, 100, {
            DamageType.PIERCING: 1.0, DamageType.SLASHING: 2.0, DamageType.BLUNT: 1.0,
        }))
        .build()
    )


@pytest.fixture
def gobbo():
    return build_humanoid("Gobbo")
