from __future__ import annotations

__all__ = [
    "__version__",
    "AnatomyEngineError",
    "AnatomyInvariantError",
    "BlueprintError",
    "BuilderError",
    "EmptyBodyPartError",
    "MultiplierTableError",
    "RemovedBodyPartError",
    "UnknownBodyPartError",
    "BodyPart",
    "BodyPartBuilder",
    "BodyPartConnection",
    "BodyPartType",
    "DamageInstance",
    "DamageMultipliers",
    "DamageResult",
    "DamageType",
    "Destroyed",
    "Mob",
    "NoDamage",
    "Severed",
    "TissueLayer",
    "TissueLayerType",
    "TookDamage",
]
__version__ = "0.1.0.dev0"


class AnatomyEngineError(Exception):
    """Public umbrella exception for engine misuse."""


class BuilderError(AnatomyEngineError):
    """Raised by ``BodyPartBuilder.build`` when no layer was added."""

    def __init__(self, message: str = "BodyPart must have at least 1 layer") -> None:
        super().__init__(message)


class MultiplierTableError(AnatomyEngineError, ValueError):
    """A damage multiplier table is missing an entry for some damage type."""


class BlueprintError(AnatomyEngineError):
    """An anatomy blueprint refers to a part that was never placed."""


class UnknownBodyPartError(AnatomyEngineError, KeyError):
    """A node handle that does not belong to the graph."""


class AnatomyInvariantError(AnatomyEngineError):
    """A construction-time or integration bug upstream of the engine."""


class EmptyBodyPartError(AnatomyInvariantError):
    """Aggregate requested on a body part that has no tissue layers."""


class RemovedBodyPartError(AnatomyInvariantError):
    """Payload requested from a node that has been severed off the graph."""


# Re-exports; the exceptions above must exist before these imports run.
from .damage import (  # noqa: E402
    DamageInstance,
    DamageResult,
    DamageType,
    Destroyed,
    NoDamage,
    Severed,
    TookDamage,
)
from .tissue import DamageMultipliers, TissueLayer, TissueLayerType  # noqa: E402
from .body_part import BodyPart, BodyPartType  # noqa: E402
from .builder import BodyPartBuilder  # noqa: E402
from .graph import BodyPartConnection, Mob  # noqa: E402
