"""
cli.py - Command-line interface for the Connect Four engine

This module provides a hot-seat terminal game for two people and a
``check`` command that replays a list of columns and reports the result.
The CLI only talks to GameEngine through its public methods.
"""

import argparse
import sys
from typing import Callable, List, Optional, Union

from connectfour.debug import DebugLevel, debug
from connectfour.exceptions import InvalidDimensionsError
from connectfour.game.engine import GameEngine, MoveResult
from connectfour.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, MoveOutcome

# Special command codes returned by get_human_move
QUIT = "quit"
RESTART = "restart"


def announce(result: MoveResult) -> Optional[str]:
    """End-of-game message for a terminal move, or None."""
    if result.outcome == MoveOutcome.WON:
        return f"{result.player.label} won!"
    if result.outcome == MoveOutcome.DRAW:
        return "Tie!"
    return None


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.input = input_fn
        self.output = output_fn
        self.engine: Optional[GameEngine] = None
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='connectfour', description='Connect Four')
        parser.add_argument('--debug', action='store_true', help='Enable debug output')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', help='Also write log output to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        def add_board_args(sub):
            sub.add_argument('--height', type=int, default=DEFAULT_HEIGHT,
                             help=f'Number of rows (default: {DEFAULT_HEIGHT})')
            sub.add_argument('--width', type=int, default=DEFAULT_WIDTH,
                             help=f'Number of columns (default: {DEFAULT_WIDTH})')

        play_parser = subparsers.add_parser('play', help='Play a two-player game')
        add_board_args(play_parser)

        check_parser = subparsers.add_parser('check', help='Replay moves and report the result')
        add_board_args(check_parser)
        check_parser.add_argument('--moves', required=True,
                                  help='Comma-separated column sequence, e.g. "3,0,3,0"')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the selected command and return a process exit code."""
        if not self.args:
            self.parse_args(argv)

        try:
            if self.args.command == 'play':
                return self.play_game(self.args.height, self.args.width)
            if self.args.command == 'check':
                return self.check_moves(self.args.moves, self.args.height, self.args.width)
        except InvalidDimensionsError as e:
            debug.error(str(e), "cli")
            self.output(f"Error: {e}")
            return 2

        self.output("Please specify a command. Use --help for options.")
        return 1

    def play_game(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH) -> int:
        """Play interactive hot-seat games until the user quits."""
        self.engine = GameEngine(height, width)
        self.output("Starting a new Connect Four game!")
        self.output(f"Enter a column number (0-{width - 1}) to drop a piece.")
        self.output("Other commands: 'q' to quit, 'r' to restart.")
        self.output(self.engine.render())

        while True:
            move = self.get_human_move()

            if move is None:
                continue
            if move == QUIT:
                self.output("Quitting game.")
                return 0
            if move == RESTART:
                self.engine = self.engine.reset()
                self.output("Game restarted.")
                self.output(self.engine.render())
                continue

            self.apply_move(move)

    def apply_move(self, column: int) -> MoveResult:
        """Send one column to the engine and print what happened."""
        result = self.engine.drop_piece(column)

        if not result.accepted:
            self.output(self.describe_rejection(result))
            return result

        self.output(self.engine.render())
        message = announce(result)
        if message:
            self.output(message)
            self.output("Enter 'r' to play again or 'q' to quit.")
        return result

    def describe_rejection(self, result: MoveResult) -> str:
        if result.outcome == MoveOutcome.COLUMN_OUT_OF_RANGE:
            return f"Column must be between 0 and {self.engine.width - 1}."
        if result.outcome == MoveOutcome.COLUMN_FULL:
            return f"Column {result.column} is full."
        return "The game is over. Enter 'r' to play again or 'q' to quit."

    def get_human_move(self) -> Optional[Union[int, str]]:
        """
        Read one command from the user.

        Returns:
            Column index, QUIT, RESTART, or None for unreadable input
        """
        player = self.engine.current_player
        prompt = f"{player.label} ({player}) move (columns 0-{self.engine.width - 1}, q/r): "
        try:
            user_input = self.input(prompt).strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESTART

        try:
            return int(user_input)
        except ValueError:
            self.output("Invalid input. Please enter a column number or command.")
            return None

    def check_moves(self, moves: str, height: int = DEFAULT_HEIGHT,
                    width: int = DEFAULT_WIDTH) -> int:
        """
        Replay a comma-separated list of columns from an empty board.

        Returns:
            0 if every move was accepted, 1 otherwise
        """
        try:
            columns = [int(token) for token in moves.split(',') if token.strip()]
        except ValueError as e:
            self.output(f"Error parsing moves: {e}")
            return 1

        self.engine = GameEngine(height, width)
        rejected = 0
        for index, column in enumerate(columns, start=1):
            result = self.engine.drop_piece(column)
            if not result.accepted:
                rejected += 1
                self.output(f"Move {index} ({column}) rejected: {result.outcome.name}")

        self.output(self.engine.render())
        if self.engine.status.is_terminal():
            winner = self.engine.winner
            self.output(f"{winner.label} won!" if winner is not None else "Tie!")
            if winner is not None:
                self.output(f"Winning line: {list(self.engine.winning_cells)}")
        else:
            self.output(f"In progress; {self.engine.current_player.label} to move.")

        return 1 if rejected else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
