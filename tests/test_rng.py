import numpy as np

from discscatter.sampling.rng import annulus_offset, make_rng, point_in_disc


def test_make_rng_reproducible():
    a = make_rng(5).random(4)
    b = make_rng(5).random(4)
    assert np.array_equal(a, b)


def test_make_rng_negative_seed_is_valid_and_distinct():
    a = make_rng(-1).random(3)
    b = make_rng(1).random(3)
    assert not np.array_equal(a, b)
    assert np.array_equal(make_rng(-1).random(3), make_rng(2**64 - 1).random(3))


def test_point_in_disc_inside(rng):
    pts = np.array([point_in_disc(rng, 3.0) for _ in range(2000)])
    r = np.hypot(pts[:, 0], pts[:, 1])
    assert (r <= 3.0).all()
    # uniform by area: about a quarter of points within half the radius
    assert 0.18 < np.mean(r < 1.5) < 0.32


def test_annulus_offset_in_ring(rng):
    off = np.array([annulus_offset(rng, 1.0, 2.0) for _ in range(2000)])
    r = np.hypot(off[:, 0], off[:, 1])
    assert (r >= 1.0 - 1e-12).all() and (r <= 2.0 + 1e-12).all()
    # area-uniform ring: P(r < sqrt(2.5)) = 0.5
    assert 0.42 < np.mean(r < np.sqrt(2.5)) < 0.58
