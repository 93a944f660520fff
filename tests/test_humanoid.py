import pytest

from anatomy_engine import BlueprintError, BodyPartConnection, BodyPartType
from anatomy_engine.anatomy import (
    ORGAN_CONNECTIONS,
    Blueprint,
    PartPlacement,
    Placement,
    build_mob,
    limb,
    limb_artery,
    tissue_part,
)
from anatomy_engine.tissue import TissueLayerType


def test_humanoid_shape(gobbo):
    assert gobbo.name == "Gobbo"
    assert len(gobbo) == 48
    # every non-root part hangs off its parent by two edges
    assert gobbo.graph.number_of_edges() == 94
    assert gobbo.body_part(gobbo.root).name == "chest"
    assert not gobbo.body_part(gobbo.root).severable


def test_humanoid_walk_reaches_everything_but_blood(gobbo):
    records = list(gobbo.walk())
    assert len(records) == 48
    assert {r.connection for r in records} == {None, BodyPartConnection.STRUCTURAL, BodyPartConnection.CONTAINER}


def test_humanoid_chains_stay_bilateral(gobbo):
    hand_l = gobbo.find("hand_l")
    assert gobbo.body_part(hand_l).can_grab
    fingers = [gobbo.body_part(c).name for c, _ in gobbo.children(hand_l, [BodyPartConnection.STRUCTURAL])]
    assert fingers == ["f_thumb_l", "f_index_l", "f_middle_l", "f_ring_l", "f_pinky_l"]
    depth = {r.description.split(":")[0]: r.depth for r in gobbo.walk()}
    assert depth["toes_r"] == 7
    assert depth["heart"] == 1


def test_humanoid_organs(gobbo):
    lung = gobbo.body_part(gobbo.find("lung_l"))
    assert lung.part_type is BodyPartType.ORGAN
    assert [layer.layer_type for layer in lung.layers] == [TissueLayerType.FLESH, TissueLayerType.ARTERY]
    assert gobbo.connections_between(gobbo.root, gobbo.find("heart")) == list(ORGAN_CONNECTIONS)


def test_builds_are_independent(gobbo):
    from anatomy_engine.anatomy import build_humanoid

    other = build_humanoid("Other")
    gobbo.body_part(gobbo.find("torso")).layers[0].hp = 0
    assert other.body_part(other.find("torso")).layers[0].hp == 100


def test_template_helpers():
    assert len(limb("f", 10).build().layers) == 3
    assert [layer.layer_type for layer in limb_artery("a", 5).build().layers][1] is TissueLayerType.ARTERY
    assert tissue_part("x", (TissueLayerType.FLESH, 7)).build().max_hp() == 7


@pytest.mark.parametrize(
    "placements",
    [
        (PartPlacement("arm", limb("arm", 5), "nowhere"),),
        (
            PartPlacement("arm", limb("arm", 5), "root"),
            PartPlacement("arm", limb("arm", 5), "root"),
        ),
        (PartPlacement("arms", limb("arm", 5), "root", mode=Placement.SYM_BOTH),),
        (
            PartPlacement("arms", limb("arm", 5), "root", mode=Placement.SYM),
            PartPlacement("hand", limb("hand", 5), "arms"),
        ),
    ],
)
def test_bad_blueprints(placements):
    blueprint = Blueprint("root", limb("root", 5), placements)
    with pytest.raises(BlueprintError):
        build_mob("broken", blueprint)


def test_blueprint_templates_are_frozen_copies():
    builder = limb("arm", 5)
    blueprint = Blueprint("root", limb("root", 5), (PartPlacement("arm", builder, "root"),))
    builder.severable(False).layer(limb("extra", 1).build().layers[0])
    mob = build_mob("a", blueprint)
    mob.body_part(mob.find("arm")).layers[0].hp = 0
    again = build_mob("b", blueprint)
    arm = again.body_part(again.find("arm"))
    assert arm.severable and len(arm.layers) == 3
    assert arm.layers[0].hp == 5
