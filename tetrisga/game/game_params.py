# View constants
# Note: Board dimensions live in GameConfig
# Use GameFactory.small(), GameFactory.standard() for standard configurations
COLORS = [
    (15, 15, 25),  # Empty
    (0, 240, 240),  # I - Cyan
    (160, 0, 240),  # T - Purple
    (240, 160, 0),  # L - Orange
    (0, 0, 240),  # J - Blue
    (240, 0, 0),  # Z - Red
    (0, 240, 0),  # S - Green
    (240, 240, 0),  # O - Yellow
]
GHOST_COLOR = (70, 70, 90)
TEXT_COLOR = (220, 220, 220)
BACKGROUND = (22, 22, 30)

TILE_SIZE = 30  # Size of each board cell
GAP = 20  # Margin around the board
PANEL_WIDTH = 260  # Width of the score / dashboard panel
FPS = 60
