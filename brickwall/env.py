import os

import gymnasium as gym
import numpy as np
import pygame
from gymnasium.spaces import MultiDiscrete

from .arena import Arena, GameState, InputSnapshot
from .config import ArenaConfig
from .render import Renderer, load_image

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    # Must be a short, user-facing control string:
    user_guide = "Controls: ← to move left, → to move right. Space to pause, shift to restart after game over."

    # Must be a short, user-facing description of the game:
    game_description = (
        "Break the brick wall with a bouncing ball. Red bricks take three hits, orange two, "
        "yellow one. Keep the ball off the floor and watch out for the bird."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    MAX_STEPS = 10000

    def __init__(self, render_mode="rgb_array", config=None):
        super().__init__()
        self.render_mode = render_mode
        self.config = config if config is not None else ArenaConfig()

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.config.height, self.config.width, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        pygame.init()
        self.renderer = Renderer(self.config)
        size = (self.config.obstacle.width, self.config.obstacle.height)
        self.obstacle_image = load_image(self.config.obstacle_image_path, size)

        # State variables are initialized in reset()
        self.arena = None
        self.steps = 0
        self.prev_space_held = False

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.arena = Arena(self.config, obstacle_image=self.obstacle_image)
        self.steps = 0
        self.prev_space_held = False

        return self._get_observation(), self._get_info()

    def step(self, action):
        movement = action[0]
        space_held = action[1] == 1
        shift_held = action[2] == 1

        inputs = InputSnapshot(
            left=movement == 3,
            right=movement == 4,
            pause=space_held and not self.prev_space_held,
            restart=shift_held,
        )
        self.prev_space_held = space_held

        score_before = self.arena.score
        was_over = self.arena.state is GameState.GAME_OVER
        self.arena.tick(inputs)
        self.steps += 1

        # Score drops to zero on restart; that is not a penalty
        reward = 0.0 if was_over else float(self.arena.score - score_before)

        terminated = self.arena.state is GameState.GAME_OVER
        truncated = self.steps >= self.MAX_STEPS

        return (
            self._get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info()
        )

    def _get_observation(self):
        self.renderer.draw(self.arena.snapshot())
        return self.renderer.to_array()

    def render(self):
        return self._get_observation()

    def _get_info(self):
        return {
            "score": self.arena.score,
            "steps": self.steps,
            "bricks_left": len(self.arena.bricks),
            "state": self.arena.state.value,
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.config.height, self.config.width, 3)
        assert obs.dtype == np.uint8
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.config.height, self.config.width, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert isinstance(trunc, bool)
        assert isinstance(info, dict)


if __name__ == "__main__":
    # Watch the tracking policy play
    os.environ["SDL_VIDEODRIVER"] = "x11"
    from .policy import policy

    env = GameEnv(render_mode="rgb_array")
    obs, info = env.reset()

    pygame.display.init()
    screen = pygame.display.set_mode((env.config.width, env.config.height))
    pygame.display.set_caption("Brick Wall Breaker")
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        obs, reward, terminated, truncated, info = env.step(policy(env))
        if truncated:
            print(f"Time up! Final Score: {info['score']}")
            obs, info = env.reset()

        surf = pygame.surfarray.make_surface(np.transpose(obs, (1, 0, 2)))
        screen.blit(surf, (0, 0))
        pygame.display.flip()

        clock.tick(60)

    env.close()
