from .connection import DISPLAY_CONNECTIONS, BodyPartConnection
from .mob import Alive, Mob, NodeState, PartRecord, Removed

__all__ = [
    "DISPLAY_CONNECTIONS",
    "BodyPartConnection",
    "Alive",
    "Mob",
    "NodeState",
    "PartRecord",
    "Removed",
]
