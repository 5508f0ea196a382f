"""Game objects: ball, paddle, bird obstacle and bricks.

Every object keeps an integer top-left position and a fixed size, advances
itself once per tick, reports a ``pygame.Rect`` bounding box for collision
tests and describes its current look as a ``Drawable``.
"""

import math
from collections import namedtuple
from typing import Protocol, runtime_checkable

import numpy as np
import pygame

# kind is one of "rect", "round_rect", "oval", "image"
Drawable = namedtuple(
    "Drawable",
    ["kind", "x", "y", "width", "height", "color", "outline", "image"],
    defaults=(None, None, None),
)

BRICK_COLORS = {
    3: (187, 52, 37),    # red
    2: (233, 128, 46),   # orange
    1: (247, 222, 60),   # yellow
}
COLOR_BRICK_OUTLINE = (64, 64, 64)
COLOR_PADDLE_OUTLINE = (0, 0, 0)


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def brighter(color, factor=0.7):
    """Lighten a color the way a flashing brick is drawn."""
    rgb = np.array(color, dtype=float)
    floor = int(1.0 / (1.0 - factor))
    if not rgb.any():
        return (floor, floor, floor)
    rgb = np.where((rgb > 0) & (rgb < floor), floor, rgb)
    return tuple(int(c) for c in np.clip(rgb / factor, 0, 255).astype(int))


@runtime_checkable
class GameObject(Protocol):
    x: int
    y: int
    width: int
    height: int

    def advance(self): ...

    def bounding_box(self) -> pygame.Rect: ...

    def drawable(self) -> Drawable: ...


class Ball:
    def __init__(self, x, y, size, speed_x, speed_y, arena_width,
                 speed_increment=1.05, max_speed=10.0, color=(230, 120, 50)):
        self.x = x
        self.y = y
        self.width = size
        self.height = size
        self.speed_x = float(speed_x)
        self.speed_y = float(speed_y)
        self.arena_width = arena_width
        self.speed_increment = speed_increment
        self.max_speed = max_speed
        self.color = color

    @property
    def speed(self):
        return math.hypot(self.speed_x, self.speed_y)

    def advance(self):
        self.x += _round_half_up(self.speed_x)
        self.y += _round_half_up(self.speed_y)

        # A wall only reflects a ball heading into it, and the ball is put
        # back inside so it cannot rebound again on the next tick.
        if self.x <= 0 and self.speed_x < 0:
            self.bounce_horizontal()
            self.x = 0
        elif self.x + self.width >= self.arena_width and self.speed_x > 0:
            self.bounce_horizontal()
            self.x = self.arena_width - self.width

        if self.y <= 0 and self.speed_y < 0:
            self.bounce_vertical()
            self.y = 0

    def bounce_horizontal(self):
        self.speed_x = -self.speed_x

    def bounce_vertical(self):
        self.speed_y = -self.speed_y

    def increase_speed(self):
        """Speed up after a brick hit, capped at ``max_speed``."""
        self.speed_x *= self.speed_increment
        self.speed_y *= self.speed_increment
        self._cap_speed()

    def adjust_angle(self, delta):
        self.speed_x += delta
        self._cap_speed()

    def _cap_speed(self):
        magnitude = self.speed
        if magnitude > self.max_speed:
            scale = self.max_speed / magnitude
            self.speed_x *= scale
            self.speed_y *= scale

    def is_out_of_bounds(self, arena_height):
        return self.y > arena_height

    def set_position(self, x, y):
        self.x = x
        self.y = y

    def set_velocity(self, speed_x, speed_y):
        self.speed_x = float(speed_x)
        self.speed_y = float(speed_y)
        self._cap_speed()

    def bounding_box(self):
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def drawable(self):
        return Drawable("oval", self.x, self.y, self.width, self.height, self.color)


class Paddle:
    def __init__(self, x, y, width, height, arena_width, speed=8, color=(66, 135, 245)):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.arena_width = arena_width
        self.speed = speed
        self.velocity = 0
        self.color = color

    def advance(self):
        self.x += self.velocity
        self.x = int(np.clip(self.x, 0, self.arena_width - self.width))

    def move_left(self):
        self.velocity = -self.speed

    def move_right(self):
        self.velocity = self.speed

    def stop(self):
        self.velocity = 0

    def set_position(self, x):
        self.x = int(np.clip(x, 0, self.arena_width - self.width))

    def bounding_box(self):
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def drawable(self):
        return Drawable("round_rect", self.x, self.y, self.width, self.height,
                        self.color, COLOR_PADDLE_OUTLINE)


class Obstacle:
    """A bird sliding left and right between ``min_x`` and ``max_x`` (inclusive).

    ``image`` is an optional sprite handle; without one the bird is drawn as
    an outlined oval.
    """

    def __init__(self, x, y, width, height, speed, min_x, max_x,
                 image=None, color=(255, 255, 255), outline=(40, 40, 40)):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.speed = speed
        self.min_x = min_x
        self.max_x = max_x
        self.image = image
        self.color = color
        self.outline = outline

    def advance(self):
        self.x += self.speed

        if self.x < self.min_x:
            self.x = self.min_x
            self.speed = -self.speed
        elif self.x + self.width > self.max_x:
            self.x = self.max_x - self.width
            self.speed = -self.speed

    def set_speed(self, speed):
        self.speed = speed

    def bounding_box(self):
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def drawable(self):
        if self.image is not None:
            return Drawable("image", self.x, self.y, self.width, self.height, image=self.image)
        return Drawable("oval", self.x, self.y, self.width, self.height,
                        self.color, self.outline)


class Brick:
    def __init__(self, x, y, width, height, strength, flash_duration=6):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.strength = strength
        self.visible = True
        self.flash_ticks = 0
        self.flash_duration = flash_duration

    @property
    def color(self):
        return BRICK_COLORS[min(max(self.strength, 1), 3)]

    def hit(self):
        """Take one hit. Returns True if this hit destroyed the brick."""
        if not self.visible:
            return False

        self.strength -= 1
        self.flash_ticks = self.flash_duration

        if self.strength <= 0:
            self.visible = False
            return True
        return False

    def advance(self):
        if self.flash_ticks > 0:
            self.flash_ticks -= 1

    def bounding_box(self):
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def drawable(self):
        color = brighter(self.color) if self.flash_ticks > 0 else self.color
        return Drawable("rect", self.x, self.y, self.width, self.height,
                        color, COLOR_BRICK_OUTLINE)
