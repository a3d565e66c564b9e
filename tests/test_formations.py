import pytest

from pitchside.config import (
    build_fallback_grid,
    generate_template,
    get_predefined,
    get_template,
    iter_templates,
    normalize_formation,
)
from pitchside.config.formations import slot_labels, spread_across


def test_predefined_templates_have_eleven_slots_and_one_keeper():
    templates = list(iter_templates())
    assert len(templates) == 11
    for template in templates:
        labels = slot_labels(template.slots)
        assert len(template) == 11, template.name
        assert labels.count("GK") == 1, template.name
        assert len(set(labels)) == 11, template.name
        for slot in template.slots:
            assert 0 <= slot.x <= 100 and 0 <= slot.y <= 100


def test_get_template_returns_fresh_copy():
    first = get_template("4-3-3")
    first.clear()
    second = get_template("4-3-3")
    assert len(second) == 11
    assert second[0].slot == "GK"


def test_get_template_normalizes_whitespace():
    assert normalize_formation(" 4 - 4 - 2 ") == "4-4-2"
    assert get_template(" 4 - 4 - 2 ") == list(get_predefined("4-4-2").slots)


def test_get_predefined_missing_raises():
    with pytest.raises(KeyError):
        get_predefined("2-3-5")


def test_generate_template_spreads_lines():
    slots = generate_template("3-4-2-1")
    assert slot_labels(slots) == (
        "GK",
        "DEF1", "DEF2", "DEF3",
        "MID1", "MID2", "MID3", "MID4",
        "MID21", "MID22",
        "AM1",
    )
    defence = [slot for slot in slots if slot.row == 1]
    assert [slot.x for slot in defence] == [15, 50, 85]
    assert all(slot.y == 76 for slot in defence)
    lone_striker = slots[-1]
    assert lone_striker.x == 50
    assert lone_striker.y == pytest.approx(26)
    assert lone_striker.row == 4


def test_generate_template_names_extra_rows():
    slots = generate_template("1-1-1-1-1-1")
    assert slot_labels(slots)[-1] == "ROW51"


@pytest.mark.parametrize(
    "formation",
    ["", "abc", "4", "4-x-3", "4-0-3", "-4-3", "4--3", "4.5-3-2", "4-²-3", "4-3-①", "¹¹", "4-1000-3", None],
)
def test_generate_template_rejects_garbage(formation):
    assert generate_template(formation) == []


@pytest.mark.parametrize("formation", ["4-²-3", "4-3-①", "¹¹"])
def test_non_ascii_digits_resolve_to_default_grid(formation):
    assert get_template(formation) == build_fallback_grid(11)


def test_generate_template_accepts_three_digit_lines():
    slots = generate_template("4-3-100")
    assert len(slots) == 108
    assert slot_labels(slots)[-1] == "MID2100"


def test_unknown_formation_is_generated_when_it_yields_ten_slots():
    slots = get_template("3-3-3")
    # Ten slots is accepted even though templates normally hold eleven.
    assert len(slots) == 10
    assert slots[0].slot == "GK"


def test_short_generated_formation_falls_back_to_default_grid():
    assert get_template("2-2-2") == build_fallback_grid(11)


@pytest.mark.parametrize("formation", [None, "", "abc", "4-x-3"])
def test_unresolvable_formation_uses_default_grid(formation):
    slots = get_template(formation)
    assert slot_labels(slots) == (
        "GK", "DEF1", "DEF2", "DEF3", "DEF4", "MID1", "MID2", "MID3", "FWD1", "FWD2", "FWD3",
    )


def test_large_numeric_formation_generates_structurally():
    slots = get_template("99-99")
    assert len(slots) == 199
    assert all(0 <= slot.x <= 100 and 0 <= slot.y <= 100 for slot in slots)


@pytest.mark.parametrize("count", range(0, 31))
def test_fallback_grid_has_exact_size(count):
    assert len(build_fallback_grid(count)) == count


def test_fallback_grid_edge_sizes():
    assert build_fallback_grid(0) == []
    assert build_fallback_grid(-2) == []
    assert slot_labels(build_fallback_grid(3)) == ("GK", "DEF1", "DEF2")


def test_fallback_grid_adds_extra_rows_above_forwards():
    slots = build_fallback_grid(15)
    extras = slots[11:]
    assert slot_labels(extras) == ("EX1-1", "EX1-2", "EX1-3", "EX2-1")
    assert [slot.y for slot in extras] == [18, 18, 18, 12]
    assert extras[-1].x == 50


def test_fallback_grid_keeps_extra_rows_on_the_pitch():
    slots = build_fallback_grid(40)
    assert min(slot.y for slot in slots) == 0


def test_spread_across_even_spacing():
    slots = spread_across(3, 50, "M", 2)
    assert [slot.x for slot in slots] == [15, 50, 85]
    assert slot_labels(slots) == ("M1", "M2", "M3")
    assert spread_across(0, 50, "M") == []
