"""Brick Wall Breaker: a brick-breaking arcade game with a gymnasium wrapper."""

from .arena import Arena, GameState, InputSnapshot, RenderSnapshot
from .config import (
    ArenaConfig,
    BallConfig,
    BrickGridConfig,
    ConfigError,
    ObstacleConfig,
    PaddleConfig,
)
from .entities import Ball, Brick, Drawable, GameObject, Obstacle, Paddle

__all__ = [
    "Arena",
    "ArenaConfig",
    "Ball",
    "BallConfig",
    "Brick",
    "BrickGridConfig",
    "ConfigError",
    "Drawable",
    "GameObject",
    "GameState",
    "InputSnapshot",
    "Obstacle",
    "ObstacleConfig",
    "Paddle",
    "PaddleConfig",
    "RenderSnapshot",
]
