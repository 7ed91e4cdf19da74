"""
Lifeline Maze
Find the way from the top-left corner to the bottom-right one.
Red balls cost a life, green triangles give one back.
"""

import sys

import pygame

from game.game_state import GameFlow, GameState
from game.ui_manager import UIManager
from maze.difficulty import get_config
from maze.maze_core import bfs_shortest_path
from utils.constants import (
    FPS, PANEL_H, WALL_THICK, PLAYER_SIZE_RATIO, GAME_TITLE, GAME_VERSION,
    UP, RIGHT, DOWN, LEFT
)
from utils.colors import (
    COLOR_BG, COLOR_MAZE_BG, COLOR_WALL, COLOR_PLAYER, COLOR_GOAL, COLOR_HINT
)

MOVE_KEYS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
}

PRESET_KEYS = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
}


class MazeGame:
    """
    Main game class, translates keys into move intents and draws the session
    """
    def __init__(self, config=None):
        pygame.init()

        # Screen (sized from the first session)
        self.screen = None
        self.screen_w = 0
        self.screen_h = 0
        self.cell_size = 0

        self.clock = pygame.time.Clock()
        self.running = True

        # Hint overlay (shortest path to goal)
        self.show_hint = False
        self.hint_path = None

        self.terminal_outcome = None

        self.ui_manager = UIManager()
        self.game_flow = GameFlow(
            config or get_config(1),
            on_state_changed=self._on_state_changed,
            on_terminal=self._on_terminal,
        )
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

    def _create_screen(self, width, height):
        """Create or resize screen"""
        self.screen_w = width
        self.screen_h = height
        self.screen = pygame.display.set_mode((width, height))

    def _resize_screen_for_session(self, session):
        """Fit the window to the session's grid"""
        self.cell_size = session.config.cell_size
        width = session.cols * self.cell_size
        height = session.rows * self.cell_size + PANEL_H
        if (width, height) != (self.screen_w, self.screen_h):
            self._create_screen(width, height)

    # ========== CORE NOTIFICATIONS ==========

    def _on_state_changed(self, session):
        """Called by the core after every processed move and every reset"""
        if session.player.moves == 0:
            # Fresh session
            self.terminal_outcome = None
            print(f"New maze: {session.cols}x{session.rows}, lives {session.player.lives}")
        self._resize_screen_for_session(session)
        self.hint_path = None

    def _on_terminal(self, outcome):
        """Called by the core once per win or loss"""
        self.terminal_outcome = outcome
        if outcome == GameState.WON:
            print("You Win!")
        else:
            print("Game Over!")

    # ========== INPUT ==========

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key):
        """Handle key press"""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_r:
            self.game_flow.reset()
        elif key == pygame.K_h:
            self.show_hint = not self.show_hint
        elif key in PRESET_KEYS:
            config = get_config(PRESET_KEYS[key])
            print(f"Preset: {config.name}")
            self.game_flow.select_config(config)
        elif key in MOVE_KEYS:
            # Ignored by the core while the game is won or lost
            self.game_flow.submit_move_intent(MOVE_KEYS[key])

    # ========== UPDATE ==========

    def update(self, dt):
        """Update game state"""
        self.game_flow.update(dt)

    # ========== RENDER ==========

    def render(self):
        """Render current game state"""
        self.screen.fill(COLOR_BG)

        session = self.game_flow.session
        maze_h = session.rows * self.cell_size
        pygame.draw.rect(self.screen, COLOR_MAZE_BG, (0, 0, self.screen_w, maze_h))

        # Draw entities (order matters for layering)
        self._draw_goal(session)
        if self.show_hint:
            self._draw_hint(session)
        self._draw_obstacles(session)
        self._draw_life_items(session)
        self._draw_player(session)

        # Draw maze walls
        self._draw_maze(session.grid)

        # Draw HUD
        self.ui_manager.draw_hud(self.screen, self.game_flow, maze_h, self.screen_w, PANEL_H)

        if self.terminal_outcome is not None:
            self.ui_manager.draw_terminal(self.screen, self.terminal_outcome, self.game_flow.reset_timer)

        pygame.display.flip()

    def _draw_maze(self, grid):
        """Draw maze walls"""
        cs = self.cell_size
        for cell in grid:
            x0 = cell.x * cs
            y0 = cell.y * cs
            x1 = x0 + cs
            y1 = y0 + cs

            if cell.walls[UP]:
                pygame.draw.line(self.screen, COLOR_WALL, (x0, y0), (x1, y0), WALL_THICK)
            if cell.walls[RIGHT]:
                pygame.draw.line(self.screen, COLOR_WALL, (x1, y0), (x1, y1), WALL_THICK)
            if cell.walls[DOWN]:
                pygame.draw.line(self.screen, COLOR_WALL, (x1, y1), (x0, y1), WALL_THICK)
            if cell.walls[LEFT]:
                pygame.draw.line(self.screen, COLOR_WALL, (x0, y1), (x0, y0), WALL_THICK)

    def _draw_cell(self, x, y, color, pad=4):
        """Draw filled cell"""
        cs = self.cell_size
        pygame.draw.rect(self.screen, color, (x * cs + pad, y * cs + pad, cs - pad * 2, cs - pad * 2))

    def _draw_goal(self, session):
        gx, gy = session.goal_pos
        self._draw_cell(gx, gy, COLOR_GOAL, pad=2)

    def _draw_hint(self, session):
        if self.hint_path is None:
            self.hint_path = bfs_shortest_path(session.grid, session.player.pos, session.goal_pos)
        for x, y in self.hint_path:
            self._draw_cell(x, y, COLOR_HINT, pad=self.cell_size // 3)

    def _draw_obstacles(self, session):
        """Draw obstacles (red balls)"""
        cs = self.cell_size
        for obstacle in session.obstacle_manager:
            center = (obstacle.x * cs + cs // 2, obstacle.y * cs + cs // 2)
            pygame.draw.circle(self.screen, obstacle.get_color(), center, max(2, int(cs * 0.2)))

    def _draw_life_items(self, session):
        """Draw life items (green triangles)"""
        cs = self.cell_size
        for item in session.life_item_manager:
            x0 = item.x * cs
            y0 = item.y * cs
            points = [
                (x0 + cs * 0.5, y0 + cs * 0.3),
                (x0 + cs * 0.7, y0 + cs * 0.7),
                (x0 + cs * 0.3, y0 + cs * 0.7),
            ]
            pygame.draw.polygon(self.screen, item.get_color(), points)

    def _draw_player(self, session):
        """Draw player - always visible"""
        cs = self.cell_size
        player = session.player
        size = cs * PLAYER_SIZE_RATIO
        offset = (cs - size) / 2
        pygame.draw.rect(self.screen, COLOR_PLAYER, (player.x * cs + offset, player.y * cs + offset, size, size))

    def run(self):
        """Main game loop"""
        while self.running:
            dt_ms = self.clock.tick(FPS)
            dt = dt_ms / 1000.0

            self.handle_events()
            self.update(dt)
            if self.running:
                self.render()

        pygame.quit()
        print("Game closed.")


def main():
    """Entry point"""
    game = MazeGame()
    game.run()
    sys.exit()


if __name__ == "__main__":
    main()
