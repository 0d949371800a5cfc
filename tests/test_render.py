import pygame
import pytest

from endless_runner.level import Platform, PlatformBody
from endless_runner.render import PLATFORM_COLOR, Noise1D, Renderer, lerp, smoothstep


@pytest.fixture
def renderer():
    return Renderer(pygame.Surface((320, 180)), view_size=10)


def test_view_is_twice_view_size_tall(renderer):
    assert renderer.scale == pytest.approx(9.0)
    assert renderer.aspect == pytest.approx(320 / 180)


def test_camera_centre_maps_to_screen_centre(renderer):
    assert renderer.world_to_screen(renderer.camera_x(), 0) == (160, 90)


def test_player_sits_left_of_centre(renderer):
    x, _ = renderer.world_to_screen(0, 0)
    assert 0 < x < 160


def test_platform_is_drawn_where_it_is(renderer):
    renderer.surface.fill((255, 255, 255))
    renderer.draw_platform(PlatformBody(Platform(5.0, 10.0, 0.0), 5.0))

    inside = renderer.world_to_screen(5.0, -1.0)
    above = renderer.world_to_screen(5.0, 2.0)
    assert tuple(renderer.surface.get_at(inside))[:3] == PLATFORM_COLOR
    assert tuple(renderer.surface.get_at(above))[:3] == (255, 255, 255)


def test_full_frame_renders(renderer, game):
    game.add_marker(4.0)
    renderer.render(game)


def test_noise_is_bounded_and_deterministic():
    a, b = Noise1D(7), Noise1D(7)
    for i in range(50):
        x = i * 0.37
        assert -1.0 <= a.value(x) <= 1.0
        assert a.value(x) == b.value(x)


def test_smoothstep_endpoints():
    assert smoothstep(0.0) == 0.0
    assert smoothstep(1.0) == 1.0
    assert lerp(2.0, 4.0, 0.5) == 3.0
