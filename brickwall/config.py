"""Configuration for Brick Wall Breaker.

Defaults reproduce the classic 720x540 layout: a 9x3 wall of bricks
(red, orange, yellow), a blue paddle near the bottom and a bird patrolling
the middle lane. Every value can be overridden with ``dataclasses.replace``;
invalid combinations raise ``ConfigError`` as soon as the config is built.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

Color = Tuple[int, int, int]


class ConfigError(ValueError):
    """Raised when a configuration cannot describe a playable arena."""


@dataclass(frozen=True)
class BallConfig:
    """Ball spawn point, size and speed rules."""

    x: int = 340
    y: int = 460
    size: int = 20
    speed_x: float = 3.0
    speed_y: float = -3.0
    speed_increment: float = 1.05   # 5% faster after each brick hit
    max_speed: float = 10.0
    color: Color = (230, 120, 50)


@dataclass(frozen=True)
class PaddleConfig:
    x: int = 300
    y: int = 480
    width: int = 120
    height: int = 15
    speed: int = 8                  # pixels per tick
    color: Color = (66, 135, 245)


@dataclass(frozen=True)
class ObstacleConfig:
    """Bird lane: start position, size, speed and inclusive travel bounds."""

    x: int = 100
    y: int = 200
    width: int = 50
    height: int = 40
    speed: int = 3
    min_x: int = 40
    max_x: int = 680
    color: Color = (255, 255, 255)
    outline: Color = (40, 40, 40)


@dataclass(frozen=True)
class BrickGridConfig:
    """Brick wall layout. ``row_strengths`` lists hits needed per row, top first."""

    rows: int = 3
    cols: int = 9
    offset_x: int = 60
    offset_y: int = 60
    pitch_x: int = 70
    pitch_y: int = 30
    width: int = 60
    height: int = 20
    row_strengths: Tuple[int, ...] = (3, 2, 1)
    flash_ticks: int = 6


@dataclass(frozen=True)
class ArenaConfig:
    width: int = 720
    height: int = 540
    ball: BallConfig = field(default_factory=BallConfig)
    paddle: PaddleConfig = field(default_factory=PaddleConfig)
    obstacle: ObstacleConfig = field(default_factory=ObstacleConfig)
    bricks: BrickGridConfig = field(default_factory=BrickGridConfig)

    # Scoring
    points_damage: int = 5
    points_destroy: int = 10

    # Horizontal nudge applied to the ball on every paddle hit
    paddle_deflection: float = 0.0
    reset_ball_velocity_on_restart: bool = False

    obstacle_image_path: Optional[str] = "assets/bird.png"

    # Colors
    color_bg: Color = (153, 204, 102)       # grassy green
    color_score: Color = (255, 214, 96)

    def __post_init__(self):
        self.validate()

    def validate(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(
                f"arena dimensions must be positive, got {self.width}x{self.height}"
            )

        ball = self.ball
        if ball.size <= 0:
            raise ConfigError(f"ball size must be positive, got {ball.size}")
        if ball.max_speed <= 0:
            raise ConfigError(f"ball max_speed must be positive, got {ball.max_speed}")
        if ball.speed_increment <= 0:
            raise ConfigError(
                f"ball speed_increment must be positive, got {ball.speed_increment}"
            )
        if math.hypot(ball.speed_x, ball.speed_y) > ball.max_speed:
            raise ConfigError(
                f"ball spawn velocity ({ball.speed_x}, {ball.speed_y}) exceeds max_speed {ball.max_speed}"
            )
        if not (0 <= ball.x <= self.width - ball.size and 0 <= ball.y <= self.height - ball.size):
            raise ConfigError(f"ball spawn ({ball.x}, {ball.y}) lies outside the arena")

        paddle = self.paddle
        if paddle.width <= 0 or paddle.height <= 0:
            raise ConfigError("paddle dimensions must be positive")
        if paddle.width > self.width:
            raise ConfigError(
                f"paddle width {paddle.width} exceeds arena width {self.width}"
            )
        if not 0 <= paddle.x <= self.width - paddle.width:
            raise ConfigError(f"paddle start x={paddle.x} lies outside the arena")
        if paddle.speed < 0:
            raise ConfigError(f"paddle speed must not be negative, got {paddle.speed}")

        obstacle = self.obstacle
        if obstacle.width <= 0 or obstacle.height <= 0:
            raise ConfigError("obstacle dimensions must be positive")
        if obstacle.max_x - obstacle.min_x < obstacle.width:
            raise ConfigError(
                f"obstacle travel bounds [{obstacle.min_x}, {obstacle.max_x}] "
                f"cannot hold an obstacle {obstacle.width} wide"
            )
        if obstacle.min_x < 0 or obstacle.max_x > self.width:
            raise ConfigError(
                f"obstacle travel bounds [{obstacle.min_x}, {obstacle.max_x}] "
                f"leave the arena width {self.width}"
            )
        if not (obstacle.min_x <= obstacle.x and obstacle.x + obstacle.width <= obstacle.max_x):
            raise ConfigError(
                f"obstacle start x={obstacle.x} lies outside its travel bounds"
            )

        bricks = self.bricks
        if bricks.rows <= 0 or bricks.cols <= 0:
            raise ConfigError(
                f"brick grid must have at least one row and column, got {bricks.rows}x{bricks.cols}"
            )
        if bricks.width <= 0 or bricks.height <= 0:
            raise ConfigError("brick dimensions must be positive")
        if len(bricks.row_strengths) != bricks.rows:
            raise ConfigError(
                f"row_strengths has {len(bricks.row_strengths)} entries for {bricks.rows} rows"
            )
        if any(not 1 <= s <= 3 for s in bricks.row_strengths):
            raise ConfigError(f"brick strengths must be between 1 and 3, got {bricks.row_strengths}")
        if bricks.flash_ticks < 0:
            raise ConfigError("brick flash_ticks must not be negative")

        grid_right = bricks.offset_x + (bricks.cols - 1) * bricks.pitch_x + bricks.width
        grid_bottom = bricks.offset_y + (bricks.rows - 1) * bricks.pitch_y + bricks.height
        if bricks.offset_x < 0 or grid_right > self.width:
            raise ConfigError(
                f"brick grid spans x={bricks.offset_x}..{grid_right}, "
                f"overflowing arena width {self.width}"
            )
        if bricks.offset_y < 0 or grid_bottom > self.height:
            raise ConfigError(
                f"brick grid spans y={bricks.offset_y}..{grid_bottom}, "
                f"overflowing arena height {self.height}"
            )

        if self.points_damage < 0 or self.points_destroy < 0:
            raise ConfigError("brick points must not be negative")
