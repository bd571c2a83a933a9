import math

import pytest

from captchakit.geometry import (
    AreaRect,
    Matrix,
    calc_resized_rect,
    rotate_point,
    rotated_size,
)


def test_identity_multiply():
    m = Matrix(2, 3, 4, 5, 6, 7)
    assert m.multiply(Matrix()) == m
    assert Matrix().multiply(m) == m


def test_translate_accumulates():
    m = Matrix().translate(3, 4).translate(1, 2)
    assert (m.x0, m.y0) == (4, 6)
    assert (m.xx, m.yy) == (1, 1)


def test_rotate_zero_is_identity():
    m = Matrix().rotate(0)
    assert m == Matrix()


def test_rotate_full_turn():
    m = Matrix().rotate(2 * math.pi)
    assert m.xx == pytest.approx(1)
    assert m.yx == pytest.approx(0, abs=1e-9)


def test_rotate_point_quarter():
    x, y = rotate_point(1, 0, 1, 0)
    assert (x, y) == (0, 1)


@pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-1, 3)])
def test_rotated_size_degenerate(w, h):
    assert rotated_size(w, h, 45) == (0, 0)


@pytest.mark.parametrize("w,h", [(10, 20), (33, 7)])
def test_rotated_size_zero_and_right_angle(w, h):
    assert rotated_size(w, h, 0) == (w, h)
    assert rotated_size(w, h, 90) == (h, w)


def test_rotated_size_grows_at_45():
    w, h = rotated_size(50, 50, 45)
    assert w > 50 and h > 50


def test_calc_resized_rect_fits():
    box = calc_resized_rect((0, 0, 100, 50), 50, 50, True)
    assert box[2] - box[0] == 50
    assert box[1] == 50 - box[3]


def test_calc_resized_rect_no_center():
    box = calc_resized_rect((0, 0, 50, 100), 50, 50, False)
    assert box[0] == 0 and box[3] == 50


def test_area_rect_fields():
    r = AreaRect(1, 2, 3, 4)
    assert (r.min_x, r.max_x, r.min_y, r.max_y) == (1, 2, 3, 4)