"""Constants shared by every maze game and search algorithm."""

INF = 1_000_000_000

# Movement deltas indexed by action: right, left, down, up.
DX = (1, -1, 0, 0)
DY = (0, 0, 1, -1)

# Board geometry shared by all games.
H = 5
W = 5
END_TURN = 5

# Number of characters placed in the automatic maze.
CHARACTER_N = 3

# Two-player maze settings.
PLAYER_N = 2
PLAYOUT_NUMBER = 1000

# Default search parameters.
SEARCH_WIDTH = 2
SEARCH_DEPTH = H - 1
SEARCH_NUMBER = 2
TIME_THRESHOLD = 1  # milliseconds
START_TEMPERATURE = 500.0
END_TEMPERATURE = 10.0