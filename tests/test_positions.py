import pytest

from pitchside.config.positions import (
    classify_position,
    is_goalkeeper_label,
    known_position_labels,
    normalize_position_label,
)


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("GK", ("GK",)),
        ("Goalkeeper", ("GK",)),
        ("cb", ("LCB", "RCB", "CB")),
        (" C.D.M ", ("CDM", "LDM", "RDM")),
        ("Left-Back", ("LB", "LWB")),
        ("rs", ("RS", "ST", "CF")),
        ("F", ("ST", "CF")),
    ],
)
def test_classify_specific_labels(label, expected):
    assert classify_position(label) == expected


def test_classify_falls_back_to_broad_roles():
    assert classify_position("Defender") == ("LB", "RB", "LCB", "RCB", "CB")
    assert classify_position("attacker") == ("ST", "CF", "SS", "LW", "RW")
    assert classify_position("FORWARD") == ("ST", "CF", "LW", "RW")


@pytest.mark.parametrize("label", [None, "", "   ", "123", "?", "XYZ", "D"])
def test_classify_unknown_labels_are_empty(label):
    assert classify_position(label) == ()


def test_specific_table_wins_over_broad_table():
    # "F" is a specific code; "FORWARD" only exists in the broad table.
    assert classify_position("F") != classify_position("FORWARD")


def test_normalize_position_label_strips_non_letters():
    assert normalize_position_label("l/w 2") == "LW"
    assert normalize_position_label(None) == ""


@pytest.mark.parametrize("label", ["G", "gk", "Goal-keeper", "GOALKEEPER"])
def test_goalkeeper_labels(label):
    assert is_goalkeeper_label(label)


@pytest.mark.parametrize("label", [None, "", "CB", "GKX"])
def test_non_goalkeeper_labels(label):
    assert not is_goalkeeper_label(label)


def test_every_known_label_has_candidates():
    for label in known_position_labels():
        assert classify_position(label), label
