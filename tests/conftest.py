import numpy as np
import pytest

from discscatter import Domain


@pytest.fixture
def rng(): return np.random.default_rng(0)

@pytest.fixture
def scenario():
    """Defaults of the original spawner tool."""
    return Domain(radius=10.0, min_distance=1.5, max_attempts_per_point=30, seed=12345)

@pytest.fixture
def check_disc_samples():
    """Assert containment and minimum spacing of an ``(N,2)`` sample array."""
    def _fn(pts, radius, r_min, tol=1e-9):
        pts = np.asarray(pts, float)
        assert pts.ndim == 2 and pts.shape[1] == 2 and pts.shape[0] >= 1
        assert np.isfinite(pts).all()
        assert (np.linalg.norm(pts, axis=1) <= radius + tol).all()
        if pts.shape[0] > 1:
            d = np.linalg.norm(pts[None, :, :] - pts[:, None, :], axis=-1)
            np.fill_diagonal(d, np.inf)
            assert d.min() >= r_min - tol
    return _fn

@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop the stream handler ``init_logging`` may attach during a test."""
    import logging
    pkg = logging.getLogger("discscatter")
    saved = pkg.level
    yield
    for h in [h for h in pkg.handlers if h.get_name() == "discscatter.stream"]:
        pkg.removeHandler(h)
    pkg.setLevel(saved)
