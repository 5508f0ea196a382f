"""Draw a ``RenderSnapshot`` onto a pygame surface."""

import logging
import os

import numpy as np
import pygame

from .arena import GameState

logger = logging.getLogger(__name__)

COLOR_TEXT = (255, 255, 255)
COLOR_GAME_OVER_BG = (150, 0, 0, 180)
COLOR_PAUSE_BG = (0, 0, 0, 120)


def load_image(path, size=None):
    """Load an image, or return None if it is missing or unreadable."""
    if not path:
        return None
    if not os.path.exists(path):
        logger.warning("Image %s not found, using fallback shape", path)
        return None
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError) as e:
        logger.warning("Could not load image %s (%s), using fallback shape", path, e)
        return None
    if size is not None:
        image = pygame.transform.scale(image, size)
    return image


class Renderer:
    def __init__(self, config, surface=None):
        self.config = config
        pygame.font.init()
        self.screen = surface if surface is not None else pygame.Surface((config.width, config.height))
        self.font = pygame.font.Font(None, 24)

    def draw(self, snapshot):
        self.screen.fill(self.config.color_bg)

        for d in snapshot.drawables:
            self._draw_shape(d)

        self._render_ui(snapshot)
        return self.screen

    def _draw_shape(self, d):
        rect = pygame.Rect(d.x, d.y, d.width, d.height)
        if d.kind == "image":
            self.screen.blit(pygame.transform.scale(d.image, rect.size), rect)
        elif d.kind == "oval":
            pygame.draw.ellipse(self.screen, d.color, rect)
            if d.outline is not None:
                pygame.draw.ellipse(self.screen, d.outline, rect, 1)
        elif d.kind == "round_rect":
            pygame.draw.rect(self.screen, d.color, rect, border_radius=5)
            if d.outline is not None:
                pygame.draw.rect(self.screen, d.outline, rect, 1, border_radius=5)
        else:
            pygame.draw.rect(self.screen, d.color, rect)
            if d.outline is not None:
                pygame.draw.rect(self.screen, d.outline, rect, 2)

    def _render_ui(self, snapshot):
        score_text = self.font.render(f"Score: {snapshot.score}", True, self.config.color_score)
        self.screen.blit(score_text, (self.config.width - score_text.get_width() - 20, 20))

        if snapshot.state is GameState.GAME_OVER:
            self._render_overlay(
                COLOR_GAME_OVER_BG, (320, 160),
                ["GAME OVER", f"Final Score: {snapshot.score}", "Press ENTER to restart"],
            )
        elif snapshot.state is GameState.PAUSED:
            self._render_overlay(COLOR_PAUSE_BG, (200, 60), ["PAUSED"])

    def _render_overlay(self, color, size, lines):
        cx, cy = self.config.width / 2, self.config.height / 2
        panel = pygame.Surface(size, pygame.SRCALPHA)
        pygame.draw.rect(panel, color, panel.get_rect(), border_radius=10)
        self.screen.blit(panel, panel.get_rect(center=(cx, cy)))

        line_height = 30
        top = cy - line_height * (len(lines) - 1) / 2
        for i, line in enumerate(lines):
            text = self.font.render(line, True, COLOR_TEXT)
            self.screen.blit(text, text.get_rect(center=(cx, top + i * line_height)))

    def to_array(self):
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)
