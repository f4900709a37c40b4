
import logging
import math

import pytest

from geonav._const import EARTH_RADIUS_METERS
from geonav.angles import wrap_90
from geonav.coordinates import GeodeticPoint
from geonav.spherical import *

from tests.functions import assert_point_equivalence

CAMBRIDGE = GeodeticPoint(52.205, 0.119)
PARIS = GeodeticPoint(48.857, 2.351)
DOVER = GeodeticPoint(51.127, 1.338)
CALAIS = GeodeticPoint(50.964, 1.853)


def test_distance_to():
    assert distance_to(CAMBRIDGE, PARIS) == pytest.approx(404279.16, abs=0.1)
    assert distance_to(CAMBRIDGE, PARIS, radius=3959) == pytest.approx(251.22, abs=0.01)
    assert distance_to(PARIS, CAMBRIDGE) == pytest.approx(distance_to(CAMBRIDGE, PARIS))
    assert distance_to(PARIS, PARIS) == 0.

    # One degree along the equator
    assert distance_to(GeodeticPoint(0., 0.), GeodeticPoint(0., 1.)) == pytest.approx(111194.93, abs=0.01)


def test_bearings():
    assert initial_bearing_to(CAMBRIDGE, PARIS) == pytest.approx(156.2, abs=0.05)
    assert final_bearing_to(CAMBRIDGE, PARIS) == pytest.approx(157.9, abs=0.05)

    origin = GeodeticPoint(0., 0.)
    assert initial_bearing_to(origin, GeodeticPoint(1., 0.)) == pytest.approx(0.)
    assert initial_bearing_to(origin, GeodeticPoint(0., 1.)) == pytest.approx(90.)
    assert initial_bearing_to(origin, GeodeticPoint(-1., 0.)) == pytest.approx(180.)
    assert initial_bearing_to(origin, GeodeticPoint(0., -1.)) == pytest.approx(270.)


def test_final_bearing_is_reversed_initial_bearing():
    pairs = [
        (CAMBRIDGE, PARIS),
        (DOVER, CALAIS),
        (GeodeticPoint(-33.86, 151.21), GeodeticPoint(51.47, -0.45)),
        (GeodeticPoint(0., 179.), GeodeticPoint(10., -170.)),
    ]
    for point1, point2 in pairs:
        assert final_bearing_to(point1, point2) == pytest.approx(
            (initial_bearing_to(point2, point1) + 180) % 360
        )


def test_midpoint_to():
    assert assert_point_equivalence(midpoint_to(CAMBRIDGE, PARIS), (50.5363, 1.2746))

    # Across the antimeridian
    midpoint = midpoint_to(GeodeticPoint(0., 179.), GeodeticPoint(0., -179.))
    assert midpoint.latitude == pytest.approx(0.)
    assert abs(midpoint.longitude) == pytest.approx(180.)


def test_intermediate_point_to():
    assert assert_point_equivalence(intermediate_point_to(CAMBRIDGE, PARIS, 0.25), (51.3721, 0.7073))
    assert intermediate_point_to(CAMBRIDGE, PARIS, 0.) is CAMBRIDGE
    assert intermediate_point_to(CAMBRIDGE, PARIS, 1.) is PARIS
    assert intermediate_point_to(CAMBRIDGE, PARIS, 0.5).is_near(midpoint_to(CAMBRIDGE, PARIS))
    assert intermediate_point_to(PARIS, PARIS, 0.5) is PARIS


def test_destination_point():
    greenwich = GeodeticPoint(51.47788, -0.00147)
    assert assert_point_equivalence(destination_point(greenwich, 7794, 300.7), (51.5136, -0.0983))

    # Longitudes are normalized across the antimeridian
    point = destination_point(GeodeticPoint(0., 179.5), 111194.93, 90.)
    assert point.latitude == pytest.approx(0., abs=1e-9)
    assert point.longitude == pytest.approx(-179.5, abs=1e-6)


def test_intersection():
    point = intersection(GeodeticPoint(51.8853, 0.2545), 108.547, GeodeticPoint(49.0034, 2.5735), 32.435)
    assert assert_point_equivalence(point, (50.9078, 4.5084))

    # Paths from the same start point meet there
    assert intersection(PARIS, 10., PARIS, 80.) is PARIS


def test_intersection_ambiguous(caplog):
    caplog.set_level(logging.DEBUG, logger='geonav')
    assert intersection(GeodeticPoint(0., 0.), 135., GeodeticPoint(0., 10.), 45.) is None
    assert 'ambiguous' in caplog.text


def test_intersection_colinear(caplog):
    caplog.set_level(logging.DEBUG, logger='geonav')
    assert intersection(GeodeticPoint(0., 0.), 90., GeodeticPoint(0., 10.), 90.) is None
    assert 'co-linear' in caplog.text


def test_cross_track_distance_to():
    point = GeodeticPoint(53.2611, -0.7972)
    start, end = GeodeticPoint(53.3206, -1.7297), GeodeticPoint(53.1887, 0.1334)
    assert cross_track_distance_to(point, start, end) == pytest.approx(-307.5, abs=0.05)

    # Right of the path is positive
    assert cross_track_distance_to(point, end, start) == pytest.approx(307.5, abs=0.05)
    assert cross_track_distance_to(
        GeodeticPoint(0., 5.), GeodeticPoint(0., 0.), GeodeticPoint(0., 10.)
    ) == pytest.approx(0., abs=1e-6)


def test_along_track_distance_to():
    point = GeodeticPoint(53.2611, -0.7972)
    start, end = GeodeticPoint(53.3206, -1.7297), GeodeticPoint(53.1887, 0.1334)
    assert along_track_distance_to(point, start, end) == pytest.approx(62331.5, abs=0.5)

    origin, east = GeodeticPoint(0., 0.), GeodeticPoint(0., 10.)

    # Directly abeam the start of the path
    assert along_track_distance_to(GeodeticPoint(10., 0.), origin, east) == 0.

    # Behind the start of the path
    assert along_track_distance_to(GeodeticPoint(0., -1.), origin, east) == pytest.approx(-111194.93, abs=0.01)


def test_max_latitude():
    assert max_latitude(GeodeticPoint(0., 0.), 1.) == pytest.approx(89.)
    assert max_latitude(GeodeticPoint(0., 0.), 90.) == pytest.approx(0., abs=1e-6)
    assert max_latitude(GeodeticPoint(45., 100.), 0.) == pytest.approx(90.)
    assert max_latitude(GeodeticPoint(45., 100.), 90.) == max_latitude(GeodeticPoint(45., -20.), 90.)


def test_crossing_parallels(caplog):
    caplog.set_level(logging.DEBUG, logger='geonav')

    lon1, lon2 = crossing_parallels(GeodeticPoint(0., 0.), GeodeticPoint(60., 30.), 30.)
    assert lon1 == pytest.approx(9.5941, abs=1e-4)
    assert lon2 == pytest.approx(170.4059, abs=1e-4)

    assert crossing_parallels(GeodeticPoint(0., 0.), GeodeticPoint(10., 60.), 60.) is None
    assert 'does not reach latitude' in caplog.text

    assert crossing_parallels(GeodeticPoint(10., 10.), GeodeticPoint(10., 10.), 0.) is None
    assert 'Coincident points' in caplog.text


def test_rhumb_distance_to():
    assert rhumb_distance_to(DOVER, CALAIS) == pytest.approx(40307.7, abs=0.5)
    assert rhumb_distance_to(DOVER, CALAIS, radius=6371) == pytest.approx(40.3077, abs=5e-4)

    # Due east along the equator, and across the antimeridian
    assert rhumb_distance_to(GeodeticPoint(0., 0.), GeodeticPoint(0., 1.)) == pytest.approx(111194.93, abs=0.01)
    assert rhumb_distance_to(GeodeticPoint(0., 179.), GeodeticPoint(0., -179.)) == pytest.approx(222389.85, abs=0.01)


def test_rhumb_bearing_to():
    assert rhumb_bearing_to(DOVER, CALAIS) == pytest.approx(116.7, abs=0.05)
    assert rhumb_bearing_to(GeodeticPoint(0., 179.), GeodeticPoint(0., -179.)) == pytest.approx(90.)
    assert rhumb_bearing_to(GeodeticPoint(0., -179.), GeodeticPoint(0., 179.)) == pytest.approx(270.)


def test_rhumb_destination_point():
    assert assert_point_equivalence(rhumb_destination_point(DOVER, 40300, 116.7), (50.9642, 1.853))

    point = rhumb_destination_point(GeodeticPoint(0., 0.), 111194.93, 90.)
    assert point.latitude == pytest.approx(0., abs=1e-9)
    assert point.longitude == pytest.approx(1., abs=1e-6)

    # Travelling past the pole comes back down the other side
    point = rhumb_destination_point(GeodeticPoint(89., 0.), 222389.85, 0.)
    assert point.latitude == pytest.approx(89., abs=1e-6)


def test_rhumb_midpoint_to():
    assert assert_point_equivalence(rhumb_midpoint_to(DOVER, CALAIS), (51.0455, 1.5957))

    # Points on the same parallel
    midpoint = rhumb_midpoint_to(GeodeticPoint(10., 0.), GeodeticPoint(10., 20.))
    assert midpoint.latitude == pytest.approx(10.)
    assert midpoint.longitude == pytest.approx(10.)


def test_rhumb_south_pole():
    origin, south_pole = GeodeticPoint(0., 0.), GeodeticPoint(-90., 0.)
    quarter = EARTH_RADIUS_METERS * math.pi / 2

    assert rhumb_distance_to(origin, south_pole) == pytest.approx(quarter)
    assert rhumb_bearing_to(origin, south_pole) == pytest.approx(180.)
    assert rhumb_distance_to(south_pole, south_pole) == 0.

    point = rhumb_destination_point(origin, quarter, 180.)
    assert point.latitude == pytest.approx(-90.)
    assert point.longitude == pytest.approx(0., abs=1e-6)


def test_rhumb_destination_past_pole():
    # 3.5 radians north from 80°N passes over the north pole and then the south pole
    point = rhumb_destination_point(GeodeticPoint(80., 0.), 3.5 * EARTH_RADIUS_METERS, 0.)
    assert point.latitude == pytest.approx(wrap_90(80. + math.degrees(3.5)))
    assert -80. < point.latitude < -79.
    assert point.longitude == pytest.approx(0., abs=1e-9)


def test_rhumb_midpoint_across_antimeridian():
    eastward = rhumb_midpoint_to(GeodeticPoint(10., 179.), GeodeticPoint(20., -179.))
    westward = rhumb_midpoint_to(GeodeticPoint(20., -179.), GeodeticPoint(10., 179.))

    assert eastward.latitude == pytest.approx(15.)
    assert eastward.longitude == pytest.approx(179.988, abs=1e-3)
    assert westward.is_near(eastward, 1e-9)

    midpoint = rhumb_midpoint_to(GeodeticPoint(0., -179.), GeodeticPoint(0., 179.))
    assert abs(midpoint.longitude) == pytest.approx(180.)


def test_area_of():
    triangle = [GeodeticPoint(0., 0.), GeodeticPoint(1., 0.), GeodeticPoint(0., 1.)]
    assert area_of(triangle) == pytest.approx(6182469722.7308, rel=1e-6)

    # Closed rings give the same result, and the input is not modified
    closed = triangle + [triangle[0]]
    assert area_of(closed) == pytest.approx(area_of(triangle))
    assert len(closed) == 4
    assert len(triangle) == 3

    # Winding order does not matter
    assert area_of(triangle[::-1]) == pytest.approx(area_of(triangle))

    with pytest.raises(ValueError):
        area_of(triangle[:2])

    with pytest.raises(ValueError):
        area_of([triangle[0], triangle[1], triangle[0]])


def test_area_of_polar():
    north = [GeodeticPoint(80., lon) for lon in (0., 90., 180., -90.)]
    south = [GeodeticPoint(-80., lon) for lon in (0., 90., 180., -90.)]

    assert area_of(north) == pytest.approx(2.485e12, rel=1e-2)
    assert area_of(south) == pytest.approx(area_of(north))
