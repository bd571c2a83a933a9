import pytest

from captchakit.click_validate import validate


def test_point_inside_area():
    assert validate(15, 15, 10, 10, 20, 20, 0) is True


def test_point_before_area_is_rejected():
    assert validate(9, 15, 10, 10, 20, 20, 0) is False
    assert validate(15, 9, 10, 10, 20, 20, 0) is False


@pytest.mark.parametrize("padding", [0, 3, 8])
def test_far_edges_are_inclusive(padding):
    dx, dy, width, height = 10, 20, 30, 40
    assert validate(dx + width + 2 * padding, dy, dx, dy, width, height, padding)
    assert validate(dx, dy + height + 2 * padding, dx, dy, width, height, padding)
    assert not validate(dx + width + 2 * padding + 1, dy, dx, dy, width, height, padding)
    assert not validate(dx, dy + height + 2 * padding + 1, dx, dy, width, height, padding)


def test_positive_padding_does_not_move_origin():
    dx, dy = 10, 10
    assert validate(dx, dy, dx, dy, 20, 20, 5)
    assert not validate(dx - 1, dy, dx, dy, 20, 20, 5)


def test_negative_padding_shifts_origin_and_shrinks():
    dx, dy, padding = 10, 10, -2
    assert not validate(dx, dy, dx, dy, 20, 20, padding)
    assert validate(dx - padding, dy - padding, dx, dy, 20, 20, padding)