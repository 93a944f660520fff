from anatomy_engine import (
    DamageInstance,
    DamageType,
    Destroyed,
    NoDamage,
    Severed,
    TookDamage,
)
from anatomy_engine.damage import Outcome


def test_damage_type_labels():
    assert [dt.label for dt in DamageType] == ["Piercing", "Slashing", "Blunt"]
    assert DamageType("blunt") is DamageType.BLUNT


def test_instance_str_keeps_sign():
    assert str(DamageInstance(100, DamageType.PIERCING)) == "+100 Piercing"
    assert str(DamageInstance(-10, DamageType.SLASHING)) == "-10 Slashing"
    assert str(DamageInstance(0, DamageType.BLUNT)) == "0 Blunt"


def test_instances_are_values():
    assert DamageInstance(5, DamageType.BLUNT) == DamageInstance(5, DamageType.BLUNT)
    assert DamageInstance(5, DamageType.BLUNT) != DamageInstance(5, DamageType.SLASHING)


def test_result_cases_are_distinct():
    hit = DamageInstance(3, DamageType.SLASHING)
    assert TookDamage(hit).instance is hit
    assert TookDamage(hit).kind is Outcome.TOOK_DAMAGE
    assert Destroyed() == Destroyed()
    assert Destroyed() != Severed()
    assert {r.kind for r in (Destroyed(), Severed(), NoDamage())} == {
        Outcome.DESTROYED, Outcome.SEVERED, Outcome.NO_DAMAGE,
    }
