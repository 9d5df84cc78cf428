"""Game configuration system for flexible board experimentation."""

from dataclasses import dataclass


@dataclass
class GameConfig:
    """Board dimensions and the base gravity interval used in human play.

    The gravity interval is divided by the current level, so the game speeds
    up as lines are cleared.
    """

    num_rows: int = 20
    num_cols: int = 10
    base_drop_interval_ms: float = 1000.0

    @property
    def total_cells(self) -> int:
        return self.num_rows * self.num_cols

    def validate(self):
        if self.num_rows <= 0 or self.num_cols <= 0:
            raise ValueError("Board dimensions must be positive")
        if self.base_drop_interval_ms <= 0:
            raise ValueError("Drop interval must be positive")


class GameFactory:

    @staticmethod
    def small() -> GameConfig:
        config = GameConfig(num_rows=10, num_cols=6)
        config.validate()
        return config

    @staticmethod
    def standard() -> GameConfig:
        config = GameConfig(num_rows=20, num_cols=10)
        config.validate()
        return config

    @staticmethod
    def default() -> GameConfig:
        return GameFactory.standard()

    @staticmethod
    def custom(
        num_rows: int, num_cols: int, base_drop_interval_ms: float = 1000.0
    ) -> GameConfig:
        config = GameConfig(
            num_rows=num_rows,
            num_cols=num_cols,
            base_drop_interval_ms=base_drop_interval_ms,
        )
        config.validate()
        return config
