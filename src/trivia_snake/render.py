# render.py
from typing import List, Optional, Tuple
import pygame # type: ignore

from .config import (
    Config, CFG, STATUS_H,
    BG, GRID_LINE, BLUE, BLUE_EDGE, RED, RED_EDGE, ARROW, TEXT, OVERLAY, LIGHT_TEXT,
)
from .engine import GameState, Lifecycle, UNSET

ARROW_SIZE = 30
ARROW_PAD = 10
BUTTON_W, BUTTON_H, BUTTON_GAP = 200, 36, 10


# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, fill, edge, cell: int) -> None:
    rect = pygame.Rect(gx * cell, gy * cell, cell, cell)
    pygame.draw.rect(screen, fill, rect)
    pygame.draw.rect(screen, edge, rect, 1)


def option_rects(config: Config, count: int) -> List[pygame.Rect]:
    """Button rectangles for the answer options, stacked in the middle of the board."""
    total_h = count * BUTTON_H + (count - 1) * BUTTON_GAP
    top = config.height // 2 - total_h // 2 + 20
    left = config.width // 2 - BUTTON_W // 2
    return [
        pygame.Rect(left, top + i * (BUTTON_H + BUTTON_GAP), BUTTON_W, BUTTON_H)
        for i in range(count)
    ]


class PygameRenderer:
    """Draws GameState snapshots onto a pygame surface (board on top, status bar below)."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, config: Config = CFG):
        self.screen = screen
        self.font = font
        self.config = config
        self.state: Optional[GameState] = None

    # listener hook for GameDriver.add_listener
    def __call__(self, state: GameState) -> None:
        self.state = state

    def draw(self, state: Optional[GameState] = None) -> None:
        state = state if state is not None else self.state
        if state is None:
            return
        self.screen.fill(BG)
        self.draw_board(state)
        self.draw_status(state)
        if state.lifecycle is Lifecycle.AWAITING_ANSWER:
            self.draw_question(state)
        elif state.lifecycle is Lifecycle.GAME_OVER:
            self.draw_game_over(state)

    # ----- Board -----
    def draw_board(self, state: GameState) -> None:
        cell = self.config.cell_size
        for gx in range(self.config.grid_w + 1):
            pygame.draw.line(self.screen, GRID_LINE, (gx * cell, 0), (gx * cell, self.config.height))
        for gy in range(self.config.grid_h + 1):
            pygame.draw.line(self.screen, GRID_LINE, (0, gy * cell), (self.config.width, gy * cell))

        if state.target != UNSET:
            draw_cell(self.screen, state.target[0], state.target[1], RED, RED_EDGE, cell)
        for x, y in state.trail:
            draw_cell(self.screen, x, y, BLUE, BLUE_EDGE, cell)
        draw_cell(self.screen, state.head[0], state.head[1], BLUE, BLUE_EDGE, cell)
        self.draw_arrows()

    def draw_arrows(self) -> None:
        w, h, s, p = self.config.width, self.config.height, ARROW_SIZE, ARROW_PAD
        triangles = [
            [(w / 2, p), (w / 2 - s / 2, p + s), (w / 2 + s / 2, p + s)],                  # up
            [(w / 2, h - p), (w / 2 - s / 2, h - p - s), (w / 2 + s / 2, h - p - s)],      # down
            [(p, h / 2), (p + s, h / 2 - s / 2), (p + s, h / 2 + s / 2)],                  # left
            [(w - p, h / 2), (w - p - s, h / 2 - s / 2), (w - p - s, h / 2 + s / 2)],      # right
        ]
        for points in triangles:
            pygame.draw.polygon(self.screen, ARROW, points)

    # ----- Status bar -----
    def draw_status(self, state: GameState) -> None:
        top = self.config.height + 8
        best = max(state.high_score, state.score)
        self.screen.blit(self.font.render(f"Score: {state.score}", True, TEXT), (8, top))
        self.screen.blit(self.font.render(f"Highscore: {best}", True, TEXT), (8, top + 24))

        if state.lifecycle is Lifecycle.IDLE:
            prompt = "Press SPACE to start"
        elif state.lifecycle is Lifecycle.COUNTING_DOWN:
            prompt = str(state.countdown)
        else:
            prompt = "Arrows / WASD / tap to steer"
        txt = self.font.render(prompt, True, TEXT)
        self.screen.blit(txt, txt.get_rect(topright=(self.config.width - 8, top)))

    # ----- Overlays -----
    def _dim(self) -> None:
        overlay = pygame.Surface((self.config.width, self.config.height), pygame.SRCALPHA)
        overlay.fill(OVERLAY)
        self.screen.blit(overlay, (0, 0))

    def draw_question(self, state: GameState) -> None:
        question = state.trivia.question
        if question is None:
            return
        self._dim()
        rects = option_rects(self.config, len(question.options))
        title = self.font.render(question.text, True, LIGHT_TEXT)
        self.screen.blit(title, title.get_rect(midbottom=(self.config.width // 2, rects[0].top - 12)))
        for i, (option, rect) in enumerate(zip(question.options, rects), start=1):
            pygame.draw.rect(self.screen, LIGHT_TEXT, rect, border_radius=6)
            label = self.font.render(f"{i}. {option}", True, TEXT)
            self.screen.blit(label, label.get_rect(center=rect.center))

    def draw_game_over(self, state: GameState) -> None:
        self._dim()
        cx, cy = self.config.width // 2, self.config.height // 2
        final = "New Highscore!" if state.new_high_score else f"You scored: {state.score}"
        lines = [("GAME OVER", -16), (final, 16), ("Press R to restart", 44)]
        for text, dy in lines:
            surf = self.font.render(text, True, LIGHT_TEXT)
            self.screen.blit(surf, surf.get_rect(center=(cx, cy + dy)))

    def option_at(self, pos: Tuple[int, int]) -> Optional[str]:
        """Answer option under a click, or None."""
        state = self.state
        if state is None or state.lifecycle is not Lifecycle.AWAITING_ANSWER:
            return None
        question = state.trivia.question
        if question is None:
            return None
        for option, rect in zip(question.options, option_rects(self.config, len(question.options))):
            if rect.collidepoint(pos):
                return option
        return None


def window_size(config: Config = CFG) -> Tuple[int, int]:
    return config.width, config.height + STATUS_H
