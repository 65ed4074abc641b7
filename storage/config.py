"""
Storage configuration for console TicTacToe.
Where and how the scoreboard is kept between runs.
"""


class StorageConfig:
    """
    Configuration for scoreboard persistence.
    """

    # ==================== SCOREBOARD FILE ====================
    # Relative paths resolve against the working directory
    SCOREBOARD_FILE = "scoreboard.txt"
    ENCODING = "utf-8"

    # One line: X wins, O wins, draws
    FIELD_COUNT = 3
