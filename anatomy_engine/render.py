"""
render.py – text for combat logs and anatomy dumps.

Pure functions of the engine's structured values; nothing here mutates a
body part or walks a graph on its own beyond ``Mob.walk``. Colour comes from
colorama and can be switched off per call.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from colorama import Fore, Style

from .damage import DamageInstance, DamageResult, DamageType, TookDamage
from .graph import BodyPartConnection, Mob, PartRecord

__all__ = [
    "format_damage_type",
    "format_damage_instance",
    "format_damage_result",
    "format_record",
    "render_records",
    "render_mob",
]

DAMAGE_TYPE_COLORS: Dict[DamageType, str] = {
    DamageType.PIERCING: Fore.RED,
    DamageType.SLASHING: Fore.MAGENTA,
    DamageType.BLUNT: Fore.YELLOW,
}

CONNECTION_COLORS: Dict[BodyPartConnection, str] = {
    BodyPartConnection.STRUCTURAL: Fore.BLUE,
    BodyPartConnection.BLOOD_SUPPLY: Fore.RED,
    BodyPartConnection.CONTAINER: Fore.MAGENTA,
}

INDENT = "  "


def _paint(text: str, color: Optional[str], enabled: bool) -> str:
    if not enabled or not color or not text:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def format_damage_type(damage_type: DamageType, *, color: bool = True) -> str:
    return _paint(damage_type.label, DAMAGE_TYPE_COLORS[damage_type], color)


def format_damage_instance(instance: DamageInstance, *, color: bool = True) -> str:
    """``+100 Piercing`` / ``-10 Slashing``; the whole line in the type's colour."""
    tint = DAMAGE_TYPE_COLORS[instance.damage_type]
    sign = _paint("+", tint, color) if instance.amount > 0 else ""
    amount = _paint(str(instance.amount), tint, color)
    return f"{sign}{amount} {format_damage_type(instance.damage_type, color=color)}"


def format_damage_result(
    result: DamageResult, part_name: str = "", *, color: bool = True
) -> str:
    subject = f"{part_name} " if part_name else ""
    if isinstance(result, TookDamage):
        return f"{subject}took {format_damage_instance(result.instance, color=color)}"
    return f"{subject}{_paint(str(result), Style.BRIGHT, color)}"


def format_record(record: PartRecord, *, color: bool = True) -> str:
    # the root has no incoming edge and is drawn as structural
    connection = record.connection or BodyPartConnection.STRUCTURAL
    body = _paint(record.description, CONNECTION_COLORS[connection], color)
    return f"{INDENT * record.depth}{body}"


def render_records(records: Iterable[PartRecord], *, color: bool = True) -> List[str]:
    return [format_record(r, color=color) for r in records]


def render_mob(mob: Mob, *, color: bool = True) -> str:
    return "\n".join(render_records(mob.walk(), color=color))
