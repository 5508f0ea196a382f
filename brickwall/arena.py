"""The arena: owns every game object and advances the game one tick at a time.

``Arena.tick`` is the single entry point. It takes the input sampled for this
tick, runs motion, collisions, scoring and the game-state machine, and
returns an immutable ``RenderSnapshot`` for whoever draws the frame.
"""

import logging
from collections import namedtuple
from enum import Enum

from .config import ArenaConfig
from .entities import Ball, Brick, Obstacle, Paddle

logger = logging.getLogger(__name__)


class GameState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


# pause and restart are edge-triggered (pressed this tick), left/right are held
InputSnapshot = namedtuple(
    "InputSnapshot", ["left", "right", "pause", "restart"],
    defaults=(False, False, False, False),
)

RenderSnapshot = namedtuple("RenderSnapshot", ["drawables", "score", "state"])


class Arena:
    def __init__(self, config=None, obstacle_image=None):
        self.config = config if config is not None else ArenaConfig()

        cfg = self.config
        self.paddle = Paddle(
            cfg.paddle.x, cfg.paddle.y, cfg.paddle.width, cfg.paddle.height,
            cfg.width, speed=cfg.paddle.speed, color=cfg.paddle.color,
        )
        self.ball = Ball(
            cfg.ball.x, cfg.ball.y, cfg.ball.size,
            cfg.ball.speed_x, cfg.ball.speed_y, cfg.width,
            speed_increment=cfg.ball.speed_increment,
            max_speed=cfg.ball.max_speed,
            color=cfg.ball.color,
        )
        self.obstacle = Obstacle(
            cfg.obstacle.x, cfg.obstacle.y, cfg.obstacle.width, cfg.obstacle.height,
            cfg.obstacle.speed, cfg.obstacle.min_x, cfg.obstacle.max_x,
            image=obstacle_image, color=cfg.obstacle.color, outline=cfg.obstacle.outline,
        )
        self.bricks = self._create_bricks()
        self.score = 0
        self.state = GameState.RUNNING
        self.ticks = 0

    @property
    def width(self):
        return self.config.width

    @property
    def height(self):
        return self.config.height

    def _create_bricks(self):
        grid = self.config.bricks
        bricks = []
        for r in range(grid.rows):
            for c in range(grid.cols):
                bricks.append(Brick(
                    grid.offset_x + c * grid.pitch_x,
                    grid.offset_y + r * grid.pitch_y,
                    grid.width,
                    grid.height,
                    grid.row_strengths[r],
                    flash_duration=grid.flash_ticks,
                ))
        return bricks

    def tick(self, inputs=None):
        """Advance the game by one tick and return the frame to draw."""
        if inputs is None:
            inputs = InputSnapshot()

        if self._handle_transitions(inputs) or self.state is not GameState.RUNNING:
            return self.snapshot()

        self.ticks += 1

        # Velocity follows the held keys; right wins when both are held
        self.paddle.stop()
        if inputs.left:
            self.paddle.move_left()
        if inputs.right:
            self.paddle.move_right()

        self.paddle.advance()
        self.ball.advance()
        self.obstacle.advance()
        for brick in self.bricks:
            brick.advance()

        self._handle_collisions()
        self.bricks = [b for b in self.bricks if b.visible]

        if self.ball.is_out_of_bounds(self.height):
            self.state = GameState.GAME_OVER
            logger.info("Game over after %d ticks, final score %d", self.ticks, self.score)

        return self.snapshot()

    def _handle_transitions(self, inputs):
        """Apply pause/restart input. Returns True if the state changed."""
        if inputs.restart and self.state is GameState.GAME_OVER:
            self.restart()
            return True

        if inputs.pause and self.state is not GameState.GAME_OVER:
            if self.state is GameState.PAUSED:
                self.state = GameState.RUNNING
                logger.info("Resumed")
            else:
                self.state = GameState.PAUSED
                logger.info("Paused")
            return True

        return False

    def _handle_collisions(self):
        ball_rect = self.ball.bounding_box()

        if ball_rect.colliderect(self.paddle.bounding_box()):
            self.ball.bounce_vertical()
            if self.config.paddle_deflection:
                self.ball.adjust_angle(self.config.paddle_deflection)

        if ball_rect.colliderect(self.obstacle.bounding_box()):
            self.ball.bounce_vertical()

        for brick in self.bricks:
            if brick.visible and ball_rect.colliderect(brick.bounding_box()):
                self.ball.bounce_vertical()
                if brick.hit():
                    self.score += self.config.points_destroy
                    logger.debug("Brick at (%d, %d) destroyed", brick.x, brick.y)
                else:
                    self.score += self.config.points_damage
                    logger.debug("Brick at (%d, %d) hit, %d left", brick.x, brick.y, brick.strength)
                self.ball.increase_speed()
                break  # Only one brick per tick

    def restart(self):
        """Start a new round. Paddle and obstacle stay where they are."""
        self.score = 0
        self.state = GameState.RUNNING
        self.ticks = 0
        self.bricks = self._create_bricks()

        spawn = self.config.ball
        self.ball.set_position(spawn.x, spawn.y)
        if self.config.reset_ball_velocity_on_restart:
            self.ball.set_velocity(spawn.speed_x, spawn.speed_y)
        logger.info("Restarted with %d bricks", len(self.bricks))

    def snapshot(self):
        drawables = [b.drawable() for b in self.bricks if b.visible]
        drawables.append(self.obstacle.drawable())
        drawables.append(self.paddle.drawable())
        drawables.append(self.ball.drawable())
        return RenderSnapshot(tuple(drawables), self.score, self.state)
