"""
Console TicTacToe UI
A text interface for playing TicTacToe in a terminal.

Shows:
- The board, with free cells numbered 1-9
- Whose turn it is and what the computer played
- The persisted scoreboard
- A main menu for game mode and scoreboard options
"""

import random
from enum import Enum
from typing import Callable, Optional

from logic.board import BOARD_SIZE, Board, Player
from logic.config import MatchConfig
from logic.game_state import GameState, Move
from logic.match import Match
from logic.move_validator import MoveValidator
from logic.win_checker import MatchResult
from storage.scoreboard import Scoreboard, ScoreboardStore

CLEAR_SCREEN = "\033[2J\033[H"
ROW_SEPARATOR = "-----------"


class Difficulty(Enum):
    """Computer opponent levels."""
    EASY = 1      # Random moves
    HARD = 2      # Full minimax


class MenuChoice(Enum):
    """Main menu entries, numbered as shown on screen."""
    HUMAN_VS_HUMAN = "1"
    VS_COMPUTER_EASY = "2"
    VS_COMPUTER_HARD = "3"
    SHOW_SCOREBOARD = "4"
    RESET_SCOREBOARD = "5"
    QUIT = "6"


MENU_TEXT = """
=== TicTacToe ===
1) Human vs Human
2) Human vs Computer (easy)
3) Human vs Computer (unbeatable)
4) Show scoreboard
5) Reset scoreboard
6) Quit
"""


def render_board(board: Board) -> str:
    """
    Draw the board as text.
    Empty cells show their selection number (1-9).
    """
    lines = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            index = Board.to_index(row, col)
            player = board.get(index)
            cells.append(str(index + 1) if player is None else player.mark)
        lines.append("|".join(f" {c} " for c in cells))
        if row < BOARD_SIZE - 1:
            lines.append(ROW_SEPARATOR)
    return "\n".join(lines)


def render_scoreboard(scoreboard: Scoreboard) -> str:
    return (
        f"Scoreboard - X: {scoreboard.x_wins}  "
        f"O: {scoreboard.o_wins}  Draws: {scoreboard.draws}"
    )


class HumanPlayer:
    """
    Move source that asks a person for a cell.
    Keeps asking until the input names an empty cell.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ):
        self.input_fn = input_fn
        self.output = output
        self.validator = MoveValidator()

    def choose_move(self, game_state: GameState) -> int:
        prompt = f"Player {game_state.current_player.mark}, choose a cell (1-9): "
        while True:
            result = self.validator.validate_input(game_state.board, self.input_fn(prompt))
            if result.is_valid:
                return result.index
            self.output(result.error_message)


class ConsoleUI:
    """
    Main UI class for console TicTacToe.
    """

    def __init__(
        self,
        store: Optional[ScoreboardStore] = None,
        clear_screen: bool = True,
        rng: Optional[random.Random] = None,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ):
        """Initialize the UI."""
        self.store = store if store is not None else ScoreboardStore()
        self.clear_screen = clear_screen
        self.rng = rng
        self.input_fn = input_fn
        self.output = output

        self.scoreboard = self.store.load()
        self.human = HumanPlayer(input_fn=input_fn, output=output)
        self.is_running = False

    def _show_board(self, board: Board):
        if self.clear_screen:
            self.output(CLEAR_SCREEN)
        self.output("\n" + render_board(board) + "\n")

    def _announce_move(self, config: MatchConfig, state: GameState, move: Move):
        """Redraw after every move and say where the computer played."""
        self._show_board(state.board)
        if move.player == config.computer_player:
            self.output(f"Computer ({move.player.mark}) plays {move.index + 1}")

    def _ask_human_player(self) -> Player:
        """Ask which mark the human plays against the computer."""
        while True:
            answer = self.input_fn("Play as X or O? (X moves first): ").strip().upper()
            if answer in (Player.X.mark, Player.O.mark):
                return Player[answer]
            self.output("Please enter X or O.")

    def play_match(self, config: MatchConfig) -> MatchResult:
        """
        Play one match, then record and store the result.

        Args:
            config: Match settings.

        Returns:
            The match result.
        """
        match = Match(
            config,
            self.human,
            rng=self.rng,
            on_move=lambda state, move: self._announce_move(config, state, move)
        )
        self._show_board(match.state.board)

        result = match.play()
        self._show_result(result, config)

        self.scoreboard.record(result)
        self.store.save(self.scoreboard)
        self.output(render_scoreboard(self.scoreboard))
        return result

    def _show_result(self, result: MatchResult, config: MatchConfig):
        if result.is_draw:
            self.output("It's a draw! Good game!")
        elif config.vs_computer and result.winner == config.computer_player:
            self.output(f"Computer ({result.winner.mark}) wins! Better luck next time!")
        else:
            self.output(f"Congratulations! {result.winner.mark} wins!")

    def _reset_scoreboard(self):
        self.scoreboard = self.store.reset()
        self.output("Scoreboard reset.")

    def _config_for(self, difficulty: Optional[Difficulty]) -> MatchConfig:
        if difficulty is None:
            return MatchConfig(vs_computer=False)
        return MatchConfig(
            vs_computer=True,
            human_player=self._ask_human_player(),
            computer_is_optimal=(difficulty == Difficulty.HARD)
        )

    def handle_choice(self, choice: MenuChoice):
        """Run one main menu entry."""
        if choice == MenuChoice.HUMAN_VS_HUMAN:
            self.play_match(self._config_for(None))
        elif choice == MenuChoice.VS_COMPUTER_EASY:
            self.play_match(self._config_for(Difficulty.EASY))
        elif choice == MenuChoice.VS_COMPUTER_HARD:
            self.play_match(self._config_for(Difficulty.HARD))
        elif choice == MenuChoice.SHOW_SCOREBOARD:
            self.output(render_scoreboard(self.scoreboard))
        elif choice == MenuChoice.RESET_SCOREBOARD:
            self._reset_scoreboard()
        elif choice == MenuChoice.QUIT:
            self.is_running = False

    def read_choice(self) -> MenuChoice:
        """Show the menu until a valid entry is picked."""
        while True:
            self.output(MENU_TEXT)
            answer = self.input_fn("Select an option: ").strip()
            try:
                return MenuChoice(answer)
            except ValueError:
                self.output(f"Invalid option {answer!r}. Choose 1-6.")

    def run(self):
        """Run the menu loop until the player quits."""
        self.is_running = True
        while self.is_running:
            self.handle_choice(self.read_choice())
        self.output("Goodbye!")
