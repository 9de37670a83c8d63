import math
import random

import pytest
from pygame import Vector2

from geometry import (
    circles_overlap,
    distance,
    generate_silhouette,
    heading,
    random_range,
    transform_points,
    wrap_position,
)


# =============================================================================
# DISTANCE AND OVERLAP
# =============================================================================

def test_distance_is_euclidean():
    assert distance(Vector2(0, 0), Vector2(3, 4)) == pytest.approx(5.0)


def test_touching_circles_do_not_overlap():
    # Exactly r1 + r2 apart
    assert not circles_overlap(Vector2(0, 0), 10, Vector2(30, 0), 20)


def test_circles_overlap_just_inside_sum_of_radii():
    assert circles_overlap(Vector2(0, 0), 10, Vector2(29.9, 0), 20)


@pytest.mark.parametrize("c1, r1, c2, r2", [
    ((0, 0), 5, (3, 4), 1),
    ((100, 100), 40, (150, 120), 20),
    ((10, 10), 2, (500, 300), 40),
    ((0, 0), 1, (2, 0), 1),
])
def test_overlap_is_symmetric(c1, r1, c2, r2):
    a, b = Vector2(c1), Vector2(c2)
    assert circles_overlap(a, r1, b, r2) == circles_overlap(b, r2, a, r1)


# =============================================================================
# RANDOM HELPERS
# =============================================================================

def test_random_range_stays_in_bounds():
    rng = random.Random(7)
    values = [random_range(rng, -1.5, 1.5) for _ in range(500)]
    assert all(-1.5 <= v < 1.5 for v in values)


def test_heading_is_unit_vector():
    assert heading(-math.pi / 2).x == pytest.approx(0.0, abs=1e-9)
    assert heading(-math.pi / 2).y == pytest.approx(-1.0)
    assert heading(1.234).length() == pytest.approx(1.0)


# =============================================================================
# WRAPPING
# =============================================================================

def test_wrap_without_margin_moves_to_opposite_edge():
    pos = Vector2(-0.5, 601)
    wrap_position(pos, 800, 600)
    assert pos == Vector2(800, 0)


def test_wrap_leaves_on_screen_positions_alone():
    pos = Vector2(800, 0)
    wrap_position(pos, 800, 600)
    assert pos == Vector2(800, 0)


def test_wrap_with_margin_waits_until_fully_off_screen():
    pos = Vector2(-39, 300)
    wrap_position(pos, 800, 600, margin=40)
    assert pos.x == -39

    pos = Vector2(-40.5, 300)
    wrap_position(pos, 800, 600, margin=40)
    assert pos.x == 840


# =============================================================================
# SILHOUETTES
# =============================================================================

def test_silhouette_vertex_count_between_8_and_11():
    rng = random.Random(3)
    counts = {len(generate_silhouette(rng, 40)) for _ in range(200)}
    assert counts <= set(range(8, 12))
    assert min(counts) == 8 and max(counts) == 11


def test_silhouette_radii_are_jittered_within_20_percent():
    rng = random.Random(11)
    for point in generate_silhouette(rng, 40):
        assert 32 - 1e-9 <= point.length() <= 48 + 1e-9


def test_silhouette_vertices_evenly_spaced_in_angle():
    points = generate_silhouette(random.Random(5), 20)
    step = 360 / len(points)
    for i, point in enumerate(points):
        diff = (Vector2(1, 0).angle_to(point) - i * step) % 360
        assert min(diff, 360 - diff) < 1e-6


def test_transform_points_rotates_then_translates():
    [(x, y)] = transform_points([Vector2(10, 0)], Vector2(100, 100), math.pi / 2)
    assert x == pytest.approx(100)
    assert y == pytest.approx(110)
