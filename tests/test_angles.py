
import math

import pytest

from geonav.angles import *


def test_to_radians_degrees():
    assert to_radians(180) == pytest.approx(math.pi)
    assert to_degrees(math.pi / 2) == pytest.approx(90)


def test_wrap_360():
    assert wrap_360(0) == 0
    assert wrap_360(359.5) == 359.5
    assert wrap_360(360) == 0
    assert wrap_360(-1) == 359
    assert wrap_360(725) == 5


def test_wrap_180():
    # Values within range pass through untouched, including both bounds
    assert wrap_180(180) == 180
    assert wrap_180(-180) == -180
    assert wrap_180(45.5) == 45.5

    assert wrap_180(190) == -170
    assert wrap_180(-190) == 170
    assert wrap_180(540) == -180
    assert wrap_180(360) == 0


def test_wrap_90():
    assert wrap_90(90) == 90
    assert wrap_90(-45) == -45
    assert wrap_90(91) == pytest.approx(89)
    assert wrap_90(-100) == pytest.approx(-80)
    assert wrap_90(180) == pytest.approx(0)
    assert wrap_90(270) == pytest.approx(-90)


def test_wrap_radians():
    assert wrap_2pi(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
    assert wrap_2pi(1.) == 1.
    assert wrap_pi(4.) == pytest.approx(4. - 2 * math.pi)
    assert wrap_pi(math.pi) == math.pi
    assert wrap_half_pi(math.pi) == pytest.approx(0)
    assert wrap_half_pi(-2.) == pytest.approx(2. - math.pi)


def test_mixed_conversions():
    assert wrap_radians_to_360(-math.pi / 2) == pytest.approx(270)
    assert wrap_radians_to_180(3 * math.pi / 2) == pytest.approx(-90)
    assert wrap_radians_to_90(math.pi) == pytest.approx(0)

    assert radians_2pi(-90) == pytest.approx(3 * math.pi / 2)
    assert radians_pi(270) == pytest.approx(-math.pi / 2)
    assert radians_half_pi(100) == pytest.approx(math.radians(80))


def test_tan_half_angle():
    assert tan_half_angle(math.pi / 2) == pytest.approx(1)
    assert tan_half_angle_rotated(0) == pytest.approx(1)
    assert math.log(tan_half_angle_rotated(math.radians(45))) == pytest.approx(0.8813736)


def test_bearing_delta():
    assert bearing_delta(350, 10) == 20
    assert bearing_delta(10, 350) == -20
    assert bearing_delta(0, 180) == -180
    assert bearing_delta(90, 90) == 0
