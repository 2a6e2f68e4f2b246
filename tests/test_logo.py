import pytest

from puzzlekit.logo import Logo, draw


def test_forward_draws_vertical_line():
    assert draw(["FD 3"]) == ["#"] * 3


def test_turn_right_draws_horizontal_line():
    assert draw(["RT 90;FD 4"]) == ["#" * 4]


def test_square():
    assert draw(["FD 2;RT 90;FD 2;RT 90;FD 2;RT 90;FD 2"]) == ["###", "# #", "###"]


def test_pen_up_leaves_gap():
    assert draw(["RT 90;FD 1;PU;FD 2;PD;FD 1"]) == ["#  #"]


def test_nothing_drawn_with_pen_up():
    assert draw(["PU;FD 3;RT 90;FD 2"]) == []


def test_set_pen_character():
    assert draw(["SETPC *;FD 2"]) == ["*"] * 2


def test_clear_screen_background_is_trimmed():
    assert draw(["CS .;RT 90;FD 3"]) == draw(["RT 90;FD 3"])


def test_left_equals_three_rights():
    commands = "FD 2;{};FD 3"
    assert draw([commands.format("LT 90")]) == draw([commands.format("RT 270")])


def test_commands_are_case_insensitive():
    assert draw(["fd 2;rt 90;fd 3"]) == draw(["FD 2;RT 90;FD 3"])


def test_commands_across_lines_match_single_line():
    assert draw(["FD 2", "RT 90", "FD 2"]) == draw(["FD 2;RT 90;FD 2"])


def test_common_indent_removed():
    picture = draw(["FD 2;RT 90;PU;FD 2;RT 90;PD;FD 2"])
    assert any(not line.startswith(" ") for line in picture if line)
    assert all(not line.endswith(" ") for line in picture)


def test_class_matches_draw():
    logo = Logo()
    for command in ("RT 90", "FD 3", "LT 90", "FD 2"):
        logo.process(command)
    assert logo.render() == draw(["RT 90;FD 3;LT 90;FD 2"])


def test_negative_distance_rejected():
    with pytest.raises(ValueError):
        draw(["FD -1"])


def test_missing_number_rejected():
    with pytest.raises(ValueError):
        draw(["FD x"])


def test_missing_clear_character_rejected():
    with pytest.raises(ValueError):
        Logo().process("CS")