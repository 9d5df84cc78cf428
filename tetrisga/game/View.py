import pygame

from tetrisga.game.game import GameSnapshot
from tetrisga.game.game_config import GameConfig
from tetrisga.game.game_params import (
    BACKGROUND,
    COLORS,
    GAP,
    GHOST_COLOR,
    PANEL_WIDTH,
    TEXT_COLOR,
    TILE_SIZE,
)
from tetrisga.training.evolution import PopulationStats


class View:

    def __init__(self, config: GameConfig):
        self.config = config
        self.font = None

        # Calculate screen dimensions based on config
        self.board_width = TILE_SIZE * self.config.num_cols
        self.board_height = TILE_SIZE * self.config.num_rows
        self.screen_width = GAP + self.board_width + GAP + PANEL_WIDTH
        self.screen_height = GAP + self.board_height + GAP

    def _font(self):
        if self.font is None:
            self.font = pygame.font.Font(None, 26)
        return self.font

    def draw_cell(self, screen, row, col, color, inset=1):
        rect = pygame.Rect(
            GAP + col * TILE_SIZE + inset,
            GAP + row * TILE_SIZE + inset,
            TILE_SIZE - 2 * inset,
            TILE_SIZE - 2 * inset,
        )
        pygame.draw.rect(screen, color, rect)

    def draw_shape(self, screen, shape, x, y, color):
        for r, row in enumerate(shape):
            for c, cell in enumerate(row):
                if cell and y + r >= 0:
                    self.draw_cell(screen, y + r, x + c, color)

    def draw(self, screen, snapshot: GameSnapshot, show_ghost=True):
        screen.fill(BACKGROUND)
        for row in range(self.config.num_rows):
            for col in range(self.config.num_cols):
                self.draw_cell(screen, row, col, COLORS[snapshot.board[row][col]])

        if not snapshot.dead:
            if show_ghost:
                self.draw_shape(
                    screen, snapshot.piece_shape, snapshot.piece_x, snapshot.ghost_y, GHOST_COLOR
                )
            self.draw_shape(
                screen,
                snapshot.piece_shape,
                snapshot.piece_x,
                snapshot.piece_y,
                COLORS[snapshot.piece_id],
            )

    def draw_text(self, screen, lines: list[str]):
        x = GAP + self.board_width + GAP
        y = GAP
        for line in lines:
            text = self._font().render(line, True, TEXT_COLOR)
            screen.blit(text, (x, y))
            y += 28

    def show_score(self, screen, snapshot: GameSnapshot):
        self.draw_text(
            screen,
            [
                f"Score: {snapshot.score}",
                f"Lines: {snapshot.lines}",
                f"Level: {snapshot.level}",
            ],
        )

    def show_dashboard(self, screen, stats: PopulationStats, speed: float):
        lines = [
            f"Generation: {stats.generation}",
            f"Alive: {stats.alive}/{stats.population_size}",
            f"Best fitness: {int(stats.best_fitness)}",
            f"Max lines: {stats.max_lines}",
            f"Speed: {speed:.1f}x",
        ]
        if stats.best_weights is not None:
            names = ("Height", "Lines", "Holes", "Bump")
            lines += [f"{name}: {w:+.2f}" for name, w in zip(names, stats.best_weights)]
        self.draw_text(screen, lines)

    def show_menu(self, screen):
        screen.fill(BACKGROUND)
        self.draw_text(
            screen,
            ["H - play", "A - evolve AI", "ESC - menu / quit", "+/- - AI speed"],
        )

    def show_game_over(self, screen, score, lines):
        font = pygame.font.Font(None, 60)
        text = font.render("Game over!", True, (255, 255, 255))
        text_rect = text.get_rect(
            center=(GAP + self.board_width // 2, self.screen_height // 2 - 30)
        )
        result_text = font.render(f"{score} - {lines}", True, (255, 255, 255))
        result_text_rect = result_text.get_rect(
            center=(GAP + self.board_width // 2, self.screen_height // 2 + 30)
        )
        screen.blit(text, text_rect)
        screen.blit(result_text, result_text_rect)
