"""
UI Manager - handles HUD and end-of-game overlay rendering
"""

import pygame
from utils.colors import (
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM, COLOR_PANEL_BG,
    COLOR_LIFE_FULL, COLOR_LIFE_EMPTY, COLOR_OVERLAY,
    COLOR_WIN_TEXT, COLOR_LOSE_TEXT
)
from game.game_state import GameState


def lives_text(player):
    """HUD label for the player's lives"""
    return f"Lives: {player.lives}/{player.max_lives}"


class UIManager:
    """
    Manages all UI rendering
    """
    def __init__(self):
        # Fonts
        self.font_small = None
        self.font_medium = None
        self.font_title = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_title = pygame.font.SysFont("consolas", 40, bold=True)

    def draw_hud(self, screen, game_flow, panel_y, screen_w, panel_h):
        """
        Draw HUD (Heads-Up Display)

        Args:
            screen: Pygame screen
            game_flow: GameFlow being played
            panel_y: Y position of panel
            screen_w: Screen width
            panel_h: Panel height
        """
        player = game_flow.player
        config = game_flow.session.config

        # Panel background
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))

        # Lives (top left)
        self._draw_lives(screen, player, 10, panel_y + 10)

        # Stats (top right)
        stats = f"{config.name} {config.cols}x{config.rows}  Moves: {player.moves}  W/L: {game_flow.wins}/{game_flow.losses}"
        text = self.font_small.render(stats, True, COLOR_TEXT_DIM)
        screen.blit(text, (screen_w - text.get_width() - 10, panel_y + 14))

        # Key help (bottom)
        help_text = "Arrows/WASD: Move | R: New maze | 1-3: Size | H: Hint | ESC: Quit"
        text = self.font_small.render(help_text, True, COLOR_TEXT_DIM)
        screen.blit(text, (10, panel_y + panel_h - 22))

    def _draw_lives(self, screen, player, x, y):
        """Draw 'Lives: n/max' followed by one pip per life slot"""
        label = self.font_medium.render(lives_text(player), True, COLOR_TEXT)
        screen.blit(label, (x, y))

        pip_x = x + label.get_width() + 12
        for i in range(player.max_lives):
            color = COLOR_LIFE_FULL if i < player.lives else COLOR_LIFE_EMPTY
            pygame.draw.circle(screen, color, (pip_x + i * 18, y + 10), 6)

    def draw_terminal(self, screen, outcome, time_left=None):
        """
        Draw the win / game over overlay

        Args:
            screen: Pygame screen
            outcome: GameState.WON or GameState.LOST
            time_left: Seconds until the automatic new maze, or None
        """
        screen_w, screen_h = screen.get_size()

        # Semi-transparent overlay
        overlay = pygame.Surface((screen_w, screen_h), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        screen.blit(overlay, (0, 0))

        if outcome == GameState.WON:
            title_text, color = "You Win!", COLOR_WIN_TEXT
        else:
            title_text, color = "Game Over!", COLOR_LOSE_TEXT

        title = self.font_title.render(title_text, True, color)
        title_rect = title.get_rect(center=(screen_w // 2, screen_h // 2 - 30))
        screen.blit(title, title_rect)

        if time_left is not None:
            msg = f"New maze in {max(0.0, time_left):.1f}s  (R to skip)"
        else:
            msg = "Press R for a new maze"
        message = self.font_medium.render(msg, True, COLOR_TEXT_HIGHLIGHT)
        message_rect = message.get_rect(center=(screen_w // 2, screen_h // 2 + 20))
        screen.blit(message, message_rect)
