import pytest

from island.cloud import Cloud
from island.config import CLOUD_SPEED, DROP_DELAY, SUBROWS
from island.drips import DripPool

from conftest import ScriptedRng, make_extent


def test_starts_in_the_middle(extent):
    cloud = Cloud(extent, rng=ScriptedRng())
    assert cloud.position == (40 * SUBROWS) // 2 - 2
    assert cloud.speed == CLOUD_SPEED
    assert cloud.drop_delay == DROP_DELAY


def test_bounces_off_the_right_edge():
    extent = make_extent(20, 10)
    extent.changed = False
    pool = DripPool(extent)
    cloud = Cloud(extent, rng=ScriptedRng(), speed=1.5)
    cloud.position = 0.0
    bound = (20 - 5) * SUBROWS

    for _ in range(500):
        before = cloud.speed
        cloud.advance(pool)
        assert 0 <= cloud.position <= bound
        if cloud.position == bound:
            assert before == 1.5
            assert cloud.speed == -1.5
            break
        assert cloud.speed == 1.5
    else:
        pytest.fail("cloud never reached the right edge")

    for _ in range(500):
        cloud.advance(pool)
        assert 0 <= cloud.position <= bound
        if cloud.position == 0:
            assert cloud.speed == 1.5
            break
    else:
        pytest.fail("cloud never came back")


def test_random_drift_flips_direction(extent):
    cloud = Cloud(extent, rng=ScriptedRng(0))
    start = cloud.position
    cloud.advance(DripPool(extent))
    assert cloud.speed == -CLOUD_SPEED
    assert cloud.position == start - CLOUD_SPEED


def test_drops_a_drip_every_delay(extent):
    extent.changed = False
    pool = DripPool(extent)
    cloud = Cloud(extent, rng=ScriptedRng())
    for _ in range(DROP_DELAY - 1):
        cloud.advance(pool)
    assert len(pool) == 0
    cloud.advance(pool)
    assert len(pool) == 1
    assert pool.drips[0].x == int(cloud.position / SUBROWS) + 2
    assert cloud.drop_count == 0


def test_resize_pulls_cloud_back_on_screen():
    extent = make_extent(40, 20)
    cloud = Cloud(extent, rng=ScriptedRng())
    extent.sizes["size"] = (10, 20)
    assert extent.poll()
    cloud.advance(DripPool(extent))
    assert cloud.position == (10 - 5) * SUBROWS
    assert cloud.speed == -CLOUD_SPEED


def test_narrow_terminal_pins_cloud_at_zero():
    extent = make_extent(3, 10)
    cloud = Cloud(extent, rng=ScriptedRng())
    for _ in range(5):
        cloud.advance(DripPool(extent))
        assert cloud.position == 0


def test_missing_collaborators_are_rejected(extent):
    with pytest.raises(ValueError):
        Cloud(None)
    with pytest.raises(ValueError):
        Cloud(extent, rng=ScriptedRng()).advance(None)


def test_drift_flip_odds_scale_with_width():
    extent = make_extent(40, 20)
    rng = ScriptedRng()
    cloud = Cloud(extent, rng=rng)
    cloud.advance(DripPool(extent))
    assert rng.calls == [(0, 40 * SUBROWS)]

    extent.sizes["size"] = (12, 20)
    extent.poll()
    cloud.advance(DripPool(extent))
    assert rng.calls[-1] == (0, 12 * SUBROWS)
