"""
Game configuration for Règle de Trois.
Rule constants and AI search settings.
"""


class GameConfig:
    """
    Configuration for the game rules and the AI opponent.
    """

    # ==================== BOARD SETTINGS ====================
    # 3x3 grid of intersection points
    BOARD_SIZE = 3
    NUM_POSITIONS = BOARD_SIZE * BOARD_SIZE  # 9
    CENTER_POSITION = 4

    # ==================== RULES ====================
    # Pawns each player places before the movement phase starts
    PAWNS_PER_PLAYER = 3

    # ==================== AI SETTINGS ====================
    # Plies searched after the AI's candidate move
    SEARCH_DEPTH = 3

    # Terminal-only evaluation: a completed line is worth +/- WIN_SCORE
    WIN_SCORE = 10

    # Alpha-beta bounds (scores never leave [-WIN_SCORE, WIN_SCORE])
    SCORE_BOUND = 1000
