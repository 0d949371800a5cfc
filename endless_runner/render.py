"""
Flat pygame renderer for the runner.

Orthographic side view: the visible band is 2 * view_size units tall and
the camera sits so the player (at x = 0) is a quarter of the way in from the
left edge. Background hills are 1D gradient noise scrolling in layers.
"""
import math
from typing import Optional, Tuple

import pygame

from endless_runner.actors import Bird, Marker
from endless_runner.config import VIEW_SIZE
from endless_runner.level import PlatformBody
from endless_runner.player import Player, PlayerState

# ----------------------------- Colours --------------------------------
SKY_COLOR_TOP = (32, 54, 94)
SKY_COLOR_BOTTOM = (160, 195, 255)
PLATFORM_COLOR = (2, 21, 28)
PLAYER_COLOR = (2, 21, 28)
PLAYER_AIR_COLOR = (40, 70, 90)
BIRD_COLOR = (20, 20, 30)
MARKER_COLOR = (200, 200, 210)
HUD_COLOR = (15, 15, 20)

PARALLAX_LAYERS = [
    # (scroll factor, colour, height range as fraction of screen)
    (0.05, (70, 95, 130), (0.20, 0.45)),
    (0.125, (55, 78, 110), (0.30, 0.60)),
    (0.3, (40, 60, 80), (0.45, 0.75)),
    (1.0, (28, 42, 58), (0.60, 0.90)),
]


def lerp(a, b, t):
    return a + (b - a) * t


def smoothstep(t):
    # 6t^5 - 15t^4 + 10t^3
    return t * t * t * (t * (t * 6 - 15) + 10)


class Noise1D:
    """Deterministic Perlin-like 1D gradient noise with octaves."""
    def __init__(self, seed: int):
        self.seed = seed

    def _hash_grad(self, ix: int) -> float:
        # Pseudo-random gradient in [-1, 1] from integer coordinate
        n = (ix * 374761393 + self.seed * 668265263) & 0xFFFFFFFF
        n = (n ^ (n >> 13)) * 1274126177 & 0xFFFFFFFF
        n = (n ^ (n >> 16)) & 0xFFFFFFFF
        return ((n / 0xFFFFFFFF) * 2.0) - 1.0

    def value(self, x: float, octaves: int = 3, gain: float = 0.5) -> float:
        """Return smooth noise in [-1, 1] at float x."""
        amp = 1.0
        freq = 1.0
        total = 0.0
        norm = 0.0
        for _ in range(octaves):
            xf = x * freq
            xi = math.floor(xf)
            frac = xf - xi

            v0 = self._hash_grad(xi) * frac
            v1 = self._hash_grad(xi + 1) * (frac - 1.0)
            n = lerp(v0, v1, smoothstep(frac)) * 2.0

            total += n * amp
            norm += amp
            amp *= gain
            freq *= 2.0
        return max(-1.0, min(1.0, total / norm))


class Renderer:
    def __init__(self, surface: pygame.Surface, view_size: float = VIEW_SIZE,
                 font: Optional[pygame.font.Font] = None):
        self.surface = surface
        self.view_size = view_size
        self.font = font
        self.noise = Noise1D(7)

    @property
    def aspect(self) -> float:
        w, h = self.surface.get_size()
        return w / max(1, h)

    @property
    def scale(self) -> float:
        """Pixels per world unit."""
        return self.surface.get_height() / (2.0 * self.view_size)

    def camera_x(self) -> float:
        return self.view_size * self.aspect * 0.5

    def world_to_screen(self, x: float, y: float) -> Tuple[int, int]:
        w, h = self.surface.get_size()
        sx = (x - self.camera_x()) * self.scale + w * 0.5
        sy = h * 0.5 - y * self.scale
        return int(round(sx)), int(round(sy))

    def world_rect(self, x0: float, y0: float, x1: float, y1: float) -> pygame.Rect:
        left, top = self.world_to_screen(x0, y1)
        right, bottom = self.world_to_screen(x1, y0)
        return pygame.Rect(left, top, max(1, right - left), max(1, bottom - top))

    # --------------------------- Layers -------------------------------
    def draw_background(self, offset: float):
        w, h = self.surface.get_size()
        top = pygame.Color(*SKY_COLOR_TOP)
        bottom = pygame.Color(*SKY_COLOR_BOTTOM)
        for y in range(0, h, 4):
            c = top.lerp(bottom, y / max(1, h - 1))
            pygame.draw.rect(self.surface, c, (0, y, w, 4))

        step = 12
        for factor, color, (ymin, ymax) in PARALLAX_LAYERS:
            scroll = offset * factor * self.scale
            pts = []
            for sx in range(0, w + step, step):
                n = self.noise.value((sx + scroll) * 0.004 + factor * 100.0)
                pts.append((sx, int(lerp(ymin, ymax, (n + 1) * 0.5) * h)))
            pts.append((w, h))
            pts.append((0, h))
            pygame.draw.polygon(self.surface, color, pts)

    def draw_platform(self, body: PlatformBody):
        box = body.bounds()
        rect = self.world_rect(box.min.x, box.min.y, box.max.x, box.max.y)
        if rect.right < 0 or rect.left > self.surface.get_width():
            return
        pygame.draw.rect(self.surface, PLATFORM_COLOR, rect)

    def draw_player(self, player: Player):
        box = player.world_bounds()
        rect = self.world_rect(box.min.x, box.min.y, box.max.x, box.max.y)
        color = PLAYER_COLOR if player.state is PlayerState.GROUNDED else PLAYER_AIR_COLOR
        pygame.draw.rect(self.surface, color, rect, border_radius=3)

    def draw_bird(self, bird: Bird):
        x, y = self.world_to_screen(bird.position.x, bird.position.y)
        r = max(2, int(self.scale * 0.3))
        if bird.flying:
            # two frames of flapping
            flap = r if int(bird.elapsed * 12.0) % 2 else -r
            pts = [(x - 2 * r, y + flap), (x, y), (x + 2 * r, y + flap)]
            pygame.draw.lines(self.surface, BIRD_COLOR, False, pts, 2)
        else:
            pygame.draw.circle(self.surface, BIRD_COLOR, (x + int(bird.facing), y - r), r)

    def draw_marker(self, marker: Marker):
        x, y = self.world_to_screen(marker.position.x, marker.position.y + 1.0)
        r = max(3, int(self.scale * 0.4))
        half = int(abs(math.cos(marker.rotation)) * r) + 1
        pygame.draw.ellipse(self.surface, MARKER_COLOR, (x - half, y - r, 2 * half, 2 * r))

    def draw_hud(self, state):
        if self.font is None:
            return
        hud = f"Distance: {state.distance_travelled():7.1f}   Speed: {state.treadmill_speed:5.2f}"
        self.surface.blit(self.font.render(hud, True, HUD_COLOR), (10, 10))

        banner = None
        if state.game_over:
            banner = "GAME OVER  (R)estart"
        elif not state.running:
            banner = "PAUSED  (Esc) Resume"
        if banner:
            s = self.font.render(banner, True, (255, 255, 255))
            rect = s.get_rect(center=self.surface.get_rect().center)
            pygame.draw.rect(self.surface, (0, 0, 0), rect.inflate(40, 20))
            self.surface.blit(s, rect)

    def render(self, state):
        self.draw_background(state.background_offset)
        for obj in state.scene.objects:
            if isinstance(obj, PlatformBody):
                self.draw_platform(obj)
            elif isinstance(obj, Marker):
                self.draw_marker(obj)
            elif isinstance(obj, Bird):
                self.draw_bird(obj)
        self.draw_player(state.player)
        self.draw_hud(state)
