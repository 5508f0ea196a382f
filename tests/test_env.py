import numpy as np
import pygame
import pytest

from brickwall.arena import GameState
from brickwall.config import ArenaConfig
from brickwall.env import GameEnv
from brickwall.policy import policy


@pytest.fixture
def env():
    env = GameEnv(config=ArenaConfig(obstacle_image_path=None))
    env.reset(seed=0)
    yield env
    env.close()


def test_reset_returns_frame_and_info(env):
    obs, info = env.reset()
    assert obs.shape == (540, 720, 3)
    assert obs.dtype == np.uint8
    assert info == {"score": 0, "steps": 0, "bricks_left": 27, "state": "running"}


def test_validate_implementation(env):
    env.validate_implementation()


def test_step_rewards_score_gained(env):
    env.arena.ball.set_position(60, 60)
    env.arena.ball.set_velocity(0, 0)

    obs, reward, terminated, truncated, info = env.step([0, 0, 0])
    assert reward == 5.0
    assert info["score"] == 5
    assert not terminated
    assert not truncated


def test_movement_actions_drive_paddle(env):
    env.step([3, 0, 0])
    assert env.arena.paddle.x == 292
    env.step([4, 0, 0])
    assert env.arena.paddle.x == 300


def test_space_toggles_pause_on_press(env):
    env.step([0, 1, 0])
    assert env.arena.state is GameState.PAUSED
    # still held: no second toggle
    env.step([0, 1, 0])
    assert env.arena.state is GameState.PAUSED
    env.step([0, 0, 0])
    _, _, _, _, info = env.step([0, 1, 0])
    assert info["state"] == "running"


def test_game_over_terminates_and_shift_restarts(env):
    env.arena.ball.set_position(340, 538)
    env.arena.ball.set_velocity(0, 3)

    _, reward, terminated, _, info = env.step([0, 0, 0])
    assert terminated
    assert info["state"] == "game_over"

    _, reward, terminated, _, info = env.step([0, 0, 1])
    assert not terminated
    assert reward == 0.0
    assert info["bricks_left"] == 27
    assert info["score"] == 0


def test_truncates_after_max_steps(env):
    env.MAX_STEPS = 3
    env.step([0, 1, 0])  # paused, so the ball cannot fall out
    env.step([0, 1, 0])
    _, _, _, truncated, _ = env.step([0, 1, 0])
    assert truncated


def test_policy_tracks_ball(env):
    env.arena.ball.set_position(600, 300)
    assert policy(env) == [4, 0, 0]
    env.arena.ball.set_position(0, 300)
    assert policy(env) == [3, 0, 0]
    env.arena.ball.set_position(350, 300)
    assert policy(env) == [0, 0, 0]


def test_policy_restarts_after_game_over(env):
    env.arena.ball.set_position(340, 538)
    env.arena.ball.set_velocity(0, 3)
    env.step([0, 0, 0])
    assert policy(env) == [0, 0, 1]


def test_policy_plays_without_errors(env):
    total = 0.0
    for _ in range(500):
        _, reward, _, _, info = env.step(policy(env))
        total += reward
    assert total >= 0
    assert 0 <= info["bricks_left"] <= 27


def test_missing_obstacle_image_falls_back(tmp_path):
    env = GameEnv(config=ArenaConfig(obstacle_image_path=str(tmp_path / "bird.png")))
    env.reset()
    assert env.obstacle_image is None
    assert env.arena.snapshot().drawables[27].kind == "oval"
    env.close()


def test_obstacle_image_is_used_when_present(tmp_path):
    path = tmp_path / "bird.bmp"
    pygame.image.save(pygame.Surface((10, 8)), str(path))

    env = GameEnv(config=ArenaConfig(obstacle_image_path=str(path)))
    env.reset()
    assert env.obstacle_image.get_size() == (50, 40)
    assert env.arena.snapshot().drawables[27].kind == "image"
    obs, *_ = env.step([0, 0, 0])
    assert obs.shape == (540, 720, 3)
    env.close()
