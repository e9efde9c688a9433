import math

import pytest

from zappygui.camera2d import Camera2D
from zappygui.matrix import Matrix


def test_default_camera_matrix_is_identity():
    assert Camera2D().matrix() == Matrix.identity()


def test_default_camera_maps_points_to_themselves():
    camera = Camera2D()
    assert camera.world_to_screen((3, 4)) == pytest.approx((3, 4))
    assert camera.screen_to_world((3, 4)) == pytest.approx((3, 4))


def test_target_appears_at_offset():
    camera = Camera2D(offset=(640, 360), target=(10, 5), rotation=30, zoom=2)
    assert camera.world_to_screen((10, 5)) == pytest.approx((640, 360))


def test_round_trip():
    camera = Camera2D(offset=(640, 360), target=(10, 5), rotation=30, zoom=2)
    for point in [(0, 0), (17.5, -3), (-100, 250)]:
        screen = camera.world_to_screen(point)
        assert camera.screen_to_world(screen) == pytest.approx(point)


def test_zoom_scales_distances():
    camera = Camera2D(offset=(100, 100), target=(0, 0), rotation=45, zoom=3)
    a = camera.world_to_screen((0, 0))
    b = camera.world_to_screen((3, 4))
    assert math.dist(a, b) == pytest.approx(3 * math.dist((0, 0), (3, 4)))


def test_zero_zoom_cannot_be_inverted():
    camera = Camera2D(zoom=0)
    with pytest.raises(ZeroDivisionError):
        camera.screen_to_world((1, 1))