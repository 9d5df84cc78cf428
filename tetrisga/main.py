import sys

import pygame

from tetrisga.game.View import View
from tetrisga.game.game_config import GameFactory
from tetrisga.game.game_params import FPS
from tetrisga.training.session import (
    EvolvingState,
    HumanState,
    InputCommand,
    MenuState,
    Session,
    SessionListener,
)

KEY_COMMANDS = {
    pygame.K_LEFT: InputCommand.MOVE_LEFT,
    pygame.K_RIGHT: InputCommand.MOVE_RIGHT,
    pygame.K_DOWN: InputCommand.SOFT_DROP,
    pygame.K_UP: InputCommand.ROTATE,
    pygame.K_SPACE: InputCommand.HARD_DROP,
}


class GameOverListener(SessionListener):

    def __init__(self):
        self.final = None

    def on_game_over(self, score, lines):
        self.final = (score, lines)
        print(f"Game over - score {score}, lines {lines}")


# initialize Pygame
pygame.init()

config = GameFactory.default()
listener = GameOverListener()
session = Session(config, listener=listener)
view = View(config)

screen = pygame.display.set_mode((view.screen_width, view.screen_height))
pygame.display.set_caption("tetrisga")
clock = pygame.time.Clock()

running = True
while running:
    elapsed = clock.tick(FPS)

    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                if not isinstance(session.state, MenuState):
                    listener.final = None
                    session.return_to_menu()
                else:
                    running = False
            elif event.key == pygame.K_h:
                listener.final = None
                session.start_human()
            elif event.key == pygame.K_a:
                session.start_evolving()
            elif event.key == pygame.K_r:
                listener.final = None
                session.restart()
            elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                session.set_speed(session.evolution_config.speed_multiplier * 2)
            elif event.key == pygame.K_MINUS:
                session.set_speed(session.evolution_config.speed_multiplier / 2)
            elif event.key in KEY_COMMANDS:
                session.handle_input(KEY_COMMANDS[event.key])

    session.tick(elapsed)

    shown = session.display_game()
    if shown is None:
        view.show_menu(screen)
    else:
        snapshot = shown.snapshot()
        view.draw(screen, snapshot, show_ghost=isinstance(session.state, HumanState))
        if isinstance(session.state, EvolvingState):
            view.show_dashboard(
                screen, session.stats(), session.evolution_config.speed_multiplier
            )
        else:
            view.show_score(screen, snapshot)
        if listener.final is not None:
            view.show_game_over(screen, *listener.final)

    pygame.display.flip()


# Quit Pygame
pygame.quit()
sys.exit()
