# connect4/core/constants.py

# --- Board Dimensions ---
ROWS = 6
COLS = 7
CONNECT = 4
CENTER_COL = COLS // 2

# --- Search ---
DEPTH_LIMIT = 5
OPENING_MOVE = CENTER_COL

# --- Scoring System ---
# Logic: Score = WIN_SCORE - depth
# Win found at ply 1  = +99
# Loss found at ply 2 = -98
# Draw                = 0
WIN_SCORE = 100
DRAW_SCORE = 0

# --- Window Heuristic ---
# Applied to every 4-cell window at the depth cutoff
THREE_WITH_SPACE = 6
TWO_WITH_SPACES = 3
OPPONENT_THREAT = -2
CENTER_VERTICAL_WEIGHT = 3
