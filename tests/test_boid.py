import random

import pytest

from flocksim.boid import Boid, apply_boid_behaviors, fill_boids
from flocksim.geometry import Vec2


def _boid(x, y, velocity=Vec2(), speed=0.0):
    return Boid(position=Vec2(x, y), velocity_norm=velocity, speed=speed)


def test_fill_boids_count_and_bounds():
    boids = fill_boids(200, 320, 240, random.Random(1))
    assert len(boids) == 200
    for boid in boids:
        assert 0.0 <= boid.position.x <= 320.0
        assert 0.0 <= boid.position.y <= 240.0
        assert -1.0 <= boid.velocity_norm.x <= 1.0
        assert -1.0 <= boid.velocity_norm.y <= 1.0
        assert 1.0 <= boid.speed <= 5.0
        assert boid.acceleration == Vec2()
        assert boid.cluster_id == 0


def test_fill_boids_is_reproducible_with_seed():
    first = fill_boids(20, 100, 100, random.Random(42))
    second = fill_boids(20, 100, 100, random.Random(42))
    assert [b.position for b in first] == [b.position for b in second]
    assert [b.speed for b in first] == [b.speed for b in second]


def test_fill_boids_gives_distinct_objects():
    boids = fill_boids(10, 50, 50, random.Random(3))
    assert len({id(b) for b in boids}) == len(boids)


def test_no_neighbors_leaves_acceleration_unchanged():
    boid = _boid(1.0, 1.0)
    boid.acceleration = Vec2(0.5, -0.5)
    apply_boid_behaviors(boid, [], 100.0, 4.0, 100.0, 1.5, 100.0, 1.5)
    assert boid.acceleration == Vec2(0.5, -0.5)


def test_separation_pushes_away_with_given_strength():
    boid = _boid(0.0, 0.0)
    other = _boid(1.0, 0.0)
    apply_boid_behaviors(boid, [(other, 1.0)], 4.0, 3.0, 0.0, 1.5, 0.0, 1.5)
    assert boid.acceleration.x == pytest.approx(-3.0)
    assert boid.acceleration.y == pytest.approx(0.0)


def test_separation_ignores_coincident_boids():
    boid = _boid(0.0, 0.0)
    other = _boid(0.0, 0.0)
    apply_boid_behaviors(boid, [(other, 0.0)], 4.0, 3.0, 0.0, 1.5, 0.0, 1.5)
    assert boid.acceleration == Vec2()


def test_alignment_follows_neighbour_heading():
    boid = _boid(0.0, 0.0)
    other = _boid(3.0, 0.0, velocity=Vec2(0.0, 1.0), speed=2.0)
    apply_boid_behaviors(boid, [(other, 9.0)], 0.0, 4.0, 100.0, 1.5, 0.0, 1.5)
    assert boid.acceleration.x == pytest.approx(0.0)
    assert boid.acceleration.y == pytest.approx(1.5)


def test_cohesion_pulls_towards_neighbour():
    boid = _boid(0.0, 0.0)
    other = _boid(0.0, 2.0)
    apply_boid_behaviors(boid, [(other, 4.0)], 0.0, 4.0, 0.0, 1.5, 9.0, 1.25)
    assert boid.acceleration.x == pytest.approx(0.0)
    assert boid.acceleration.y == pytest.approx(1.25)


def test_out_of_range_neighbour_has_no_effect():
    boid = _boid(0.0, 0.0)
    other = _boid(50.0, 0.0, velocity=Vec2(1.0, 0.0), speed=1.0)
    apply_boid_behaviors(boid, [(other, 2500.0)], 100.0, 4.0, 100.0, 1.5, 100.0, 1.5)
    assert boid.acceleration == Vec2()


def test_forces_accumulate_onto_existing_acceleration():
    boid = _boid(0.0, 0.0)
    boid.acceleration = Vec2(10.0, 0.0)
    other = _boid(0.0, 2.0)
    apply_boid_behaviors(boid, [(other, 4.0)], 0.0, 4.0, 0.0, 1.5, 9.0, 2.0)
    assert boid.acceleration.x == pytest.approx(10.0)
    assert boid.acceleration.y == pytest.approx(2.0)


def test_combined_forces_stay_bounded_by_strength_sum():
    rng = random.Random(5)
    boid = _boid(50.0, 50.0, Vec2(1.0, 0.0), 1.0)
    others = fill_boids(15, 100, 100, rng)
    pairs = [(o, boid.position.distance_sqr(o.position)) for o in others]
    apply_boid_behaviors(boid, pairs, 400.0, 4.0, 3600.0, 1.5, 3600.0, 1.5)
    assert boid.acceleration.length() <= 4.0 + 1.5 + 1.5 + 1e-9