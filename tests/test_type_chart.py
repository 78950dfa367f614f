from arena.battle.chart import effectiveness, combined_effectiveness, describe_effectiveness
from arena.core.types import ElementType, parse_type


def test_single_lookups():
    assert effectiveness(ElementType.FIRE, ElementType.GRASS) == 2.0
    assert effectiveness(ElementType.WATER, ElementType.GRASS) == 0.5
    assert effectiveness(ElementType.GHOST, ElementType.NORMAL) == 0.0
    assert effectiveness(ElementType.DRAGON, ElementType.FAIRY) == 0.0


def test_unlisted_pair_defaults_to_neutral():
    assert effectiveness(ElementType.NORMAL, ElementType.FIRE) == 1.0
    assert effectiveness("fire", "not-a-type") == 1.0


def test_string_names_are_case_insensitive():
    assert effectiveness("Fire", "GRASS") == 2.0


def test_dual_type_is_product_of_lookups():
    fire = ElementType.FIRE
    expected = effectiveness(fire, ElementType.GRASS) * effectiveness(fire, ElementType.BUG)
    assert combined_effectiveness(fire, (ElementType.GRASS, ElementType.BUG)) == expected == 4.0
    assert combined_effectiveness(ElementType.WATER, (ElementType.WATER, ElementType.DRAGON)) == 0.25
    assert combined_effectiveness(ElementType.ELECTRIC, (ElementType.WATER, ElementType.GROUND)) == 0.0


def test_every_type_has_full_row():
    for attack in ElementType:
        for defend in ElementType:
            assert effectiveness(attack, defend) in {0.0, 0.5, 1.0, 2.0}


def test_narration_qualifiers():
    assert describe_effectiveness(2.0, "Foe") == "It's super effective!"
    assert describe_effectiveness(0.5, "Foe") == "It's not very effective..."
    assert describe_effectiveness(0.0, "Foe") == "It doesn't affect Foe..."
    assert describe_effectiveness(1.0, "Foe") is None


def test_parse_type():
    assert parse_type(" Fairy ") is ElementType.FAIRY
    assert parse_type("plasma") is None
    assert parse_type(7) is None
