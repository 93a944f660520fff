from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence

import colorama

from .anatomy import build_humanoid
from .damage import DamageInstance, DamageType
from .graph import Mob
from .render import (
    format_damage_instance,
    format_damage_result,
    format_damage_type,
    render_mob,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _parse_hit(text: str) -> tuple[str, DamageInstance]:
    """``PART:TYPE:AMOUNT`` → (part name, instance)."""
    try:
        part, kind, amount = text.split(":")
        return part, DamageInstance(int(amount), DamageType(kind.lower()))
    except ValueError:
        kinds = "|".join(dt.value for dt in DamageType)
        raise argparse.ArgumentTypeError(
            f"expected PART:{{{kinds}}}:AMOUNT, got {text!r}"
        ) from None


def _apply_hits(mob: Mob, hits: Sequence[tuple[str, DamageInstance]], color: bool) -> int:
    status = 0
    for part_name, instance in hits:
        handle = mob.find(part_name)
        if handle is None:
            sys.stderr.write(f"{mob.name} has no part named {part_name!r}\n")
            status = 1
            continue
        if not mob.is_alive(handle):
            sys.stderr.write(f"{part_name} is already gone\n")
            status = 1
            continue
        logger.debug("hitting %s (node %d) with %s", part_name, handle, instance)
        result = mob.take_damage(handle, instance)
        print(format_damage_result(result, part_name, color=color))
    return status


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Build a humanoid and knock it about")
    ap.add_argument("--name", default="Gobbo")
    ap.add_argument(
        "--hit",
        action="append",
        type=_parse_hit,
        default=[],
        metavar="PART:TYPE:AMOUNT",
        help="apply a damage instance to a named part (repeatable)",
    )
    ap.add_argument("--no-color", action="store_true")
    ap.add_argument(
        "--log-level",
        default=os.getenv("ANATOMY_LOG_LEVEL", "WARNING"),
        choices=LOG_LEVELS,
        type=str.upper,
    )
    args = ap.parse_args(argv)
    # argparse does not check choices against a default taken from the environment
    if args.log_level not in LOG_LEVELS:
        ap.error(f"ANATOMY_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {args.log_level!r}")

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    color = not (args.no_color or os.getenv("NO_COLOR"))
    if color:
        colorama.just_fix_windows_console()

    mob = build_humanoid(args.name)
    print(render_mob(mob, color=color))

    for damage_type in DamageType:
        print(format_damage_type(damage_type, color=color))
    print(format_damage_instance(DamageInstance(100, DamageType.PIERCING), color=color))
    print(format_damage_instance(DamageInstance(-100, DamageType.BLUNT), color=color))

    status = _apply_hits(mob, args.hit, color)
    if args.hit:
        print(render_mob(mob, color=color))
    return status


if __name__ == "__main__":
    sys.exit(main())
