"""
Display configuration for Règle de Trois.
Colors, sizes and timings for the board UI.
"""


class DisplayConfig:
    """
    Configuration class for the UI.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Règle de Trois"
    CANVAS_WIDTH = 300
    CANVAS_HEIGHT = 300

    # ==================== BOARD DRAWING ====================
    POSITION_RADIUS = 20
    LINE_WIDTH = 2
    SELECTED_WIDTH = 4

    BACKGROUND_COLOR = '#1a1a2e'
    LINE_COLOR = '#333333'
    EMPTY_COLOR = '#ffffff'
    PLAYER1_COLOR = '#ff4444'   # Red
    PLAYER2_COLOR = '#4444ff'   # Blue
    SELECTED_COLOR = '#00ff00'
    WIN_LINE_COLOR = '#ffd700'

    # ==================== TIMINGS (seconds) ====================
    # Pause before the AI's move shows up, purely cosmetic
    THINKING_DELAY_MIN = 0.8
    THINKING_DELAY_MAX = 2.0

    # Time for a pawn to slide between two positions
    ANIMATION_DURATION = 0.5
    ANIMATION_FPS = 60
