"""Session controller driving human play or population self-play.

The session never schedules itself. Whatever owns the clock (a pygame loop,
a test, a headless trainer) calls ``tick(elapsed_ms)`` once per frame and
``handle_input(command)`` per key press. Switching back to the menu drops the
running state, so a stale frame cannot step a torn-down game.
"""

import random
from dataclasses import dataclass, replace
from enum import Enum

from tetrisga.game.game import Game, GameEvent
from tetrisga.game.game_config import GameConfig, GameFactory
from tetrisga.training.evolution import EvolutionController, PopulationStats
from tetrisga.training.evolution_config import EvolutionConfig, clamp_speed


class InputCommand(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"


class SessionListener:
    """Collaborator hooks; the default implementation ignores everything."""

    def on_event(self, event: GameEvent):
        pass

    def on_game_over(self, score: int, lines: int):
        pass


@dataclass
class MenuState:
    pass


@dataclass
class HumanState:
    game: Game
    drop_counter_ms: float = 0.0
    finished: bool = False


@dataclass
class EvolvingState:
    controller: EvolutionController
    frame_accumulator: float = 0.0


class Session:
    """Holds the active mode, its game(s) and the configuration."""

    def __init__(
        self,
        game_config: GameConfig | None = None,
        evolution_config: EvolutionConfig | None = None,
        seed: int | None = None,
        listener: SessionListener | None = None,
    ):
        if game_config is None:
            game_config = GameFactory.default()
        if evolution_config is None:
            evolution_config = EvolutionConfig()

        self.game_config = game_config
        self.evolution_config = evolution_config.clamped()
        self.rng = random.Random(seed)
        self.listener = listener if listener is not None else SessionListener()

        self.controller = EvolutionController(
            game_config, self.evolution_config, seed=self.rng.getrandbits(32)
        )
        self.state: MenuState | HumanState | EvolvingState = MenuState()

    # --- mode transitions ---

    def start_human(self) -> Game:
        game = Game(self.game_config, seed=self.rng.getrandbits(32))
        self.state = HumanState(game=game)
        return game

    def start_evolving(self) -> EvolutionController:
        if self.controller.generation == 0:
            self.controller.create_population()
        self.state = EvolvingState(controller=self.controller)
        return self.controller

    def restart(self):
        """Start a fresh game in the current mode."""
        if isinstance(self.state, HumanState):
            self.start_human()
        elif isinstance(self.state, EvolvingState):
            self.start_evolving()

    def return_to_menu(self):
        self.state = MenuState()
        self.controller.reset()

    @property
    def is_running(self) -> bool:
        state = self.state
        if isinstance(state, HumanState):
            return not state.finished
        return isinstance(state, EvolvingState)

    # --- configuration ---

    def set_speed(self, speed_multiplier: float):
        self.evolution_config = replace(
            self.evolution_config, speed_multiplier=clamp_speed(speed_multiplier)
        )

    def apply_config(self, evolution_config: EvolutionConfig):
        """Clamp and apply a new configuration, restarting evolution from scratch."""
        self.evolution_config = evolution_config.clamped()
        self.controller.reset(self.evolution_config)
        if isinstance(self.state, EvolvingState):
            self.controller.create_population()
            self.state.frame_accumulator = 0.0

    # --- frame driving ---

    def tick(self, elapsed_ms: float = 0.0):
        state = self.state
        if isinstance(state, MenuState):
            return
        elif isinstance(state, HumanState):
            self._tick_human(state, elapsed_ms)
        elif isinstance(state, EvolvingState):
            self._tick_evolving(state)
        else:
            raise TypeError(f"Unknown session state {state!r}")

    def _tick_human(self, state: HumanState, elapsed_ms: float):
        if state.finished:
            return

        game = state.game
        state.drop_counter_ms += elapsed_ms
        if state.drop_counter_ms > self.game_config.base_drop_interval_ms / game.level:
            game.step_down()
            state.drop_counter_ms = 0.0

        self._after_human_action(state)

    def _tick_evolving(self, state: EvolvingState):
        speed = self.evolution_config.speed_multiplier

        if speed >= 1:
            for _ in range(int(speed)):
                if state.controller.run_step():
                    break
        else:
            state.frame_accumulator += speed
            if state.frame_accumulator >= 1:
                state.controller.run_step()
                state.frame_accumulator = 0.0

    def handle_input(self, command: InputCommand) -> bool:
        """Apply a player command to the human game. Returns True if it took effect."""
        if not isinstance(command, InputCommand):
            raise ValueError(f"Unknown input command {command!r}")

        state = self.state
        if not isinstance(state, HumanState) or state.finished or state.game.dead:
            return False

        game = state.game
        if command is InputCommand.MOVE_LEFT:
            applied = game.move_left()
        elif command is InputCommand.MOVE_RIGHT:
            applied = game.move_right()
        elif command is InputCommand.SOFT_DROP:
            applied = game.soft_drop()
        elif command is InputCommand.ROTATE:
            applied = game.rotate_piece()
        else:
            game.hard_drop()
            applied = True

        self._after_human_action(state)
        return applied

    def _after_human_action(self, state: HumanState):
        for event in state.game.drain_events():
            self.listener.on_event(event)

        if state.game.dead and not state.finished:
            state.finished = True
            self.listener.on_game_over(state.game.score, state.game.lines)

    # --- collaborator views ---

    def display_game(self) -> Game | None:
        state = self.state
        if isinstance(state, HumanState):
            return state.game
        if isinstance(state, EvolvingState):
            return state.controller.display_game()
        return None

    def stats(self) -> PopulationStats | None:
        if isinstance(self.state, EvolvingState):
            return self.controller.stats()
        return None
