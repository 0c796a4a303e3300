"""
cli.py - Command-line front end for the connectn engine

This module provides a terminal interface for playing a hot-seat game and for
replaying a fixed sequence of columns. It only forwards column indices and
history commands to GameTimeline and redraws from what the engine reports.
"""

import argparse
import sys
from typing import Callable, List, Optional, Sequence

from connectn.debug import DebugLevel, debug
from connectn.errors import ConnectNError
from connectn.game.timeline import GameTimeline
from connectn.utils import (CONNECT_N, DEFAULT_HEIGHT, DEFAULT_PLAYER_MARKS, DEFAULT_WIDTH,
                            MoveOutcome, mark_symbol, player_name)

OUTCOME_MESSAGES = {
    MoveOutcome.GAME_OVER: "The game is already won. Undo or restart to keep playing.",
    MoveOutcome.INVALID_COLUMN: "Column {column} is not on the board.",
    MoveOutcome.COLUMN_FULL: "Column {column} is full.",
}

HELP_TEXT = ("Commands: column number to play, 'u' undo, 'f' redo, 'j N' jump to move N, "
             "'h' history, 'r' restart, 'q' quit.")


def status_line(timeline: GameTimeline) -> str:
    """Status shown above the board, e.g. 'Next player: Yellow'."""
    winner = timeline.winner()
    if winner is not None:
        return f"Winner: {player_name(winner)}"
    if timeline.is_draw():
        return "Draw: the board is full."
    return f"Next player: {player_name(timeline.current_player())}"


def parse_players(value: str) -> List[str]:
    """argparse type for --players, e.g. 'R,Y,B'."""
    marks = [mark.strip() for mark in value.split(',') if mark.strip()]
    if len(marks) < 2:
        raise argparse.ArgumentTypeError("at least two comma-separated player marks are required")
    # The board draws each mark by its first character
    symbols = [mark_symbol(mark) for mark in marks]
    if len(set(symbols)) != len(symbols):
        raise argparse.ArgumentTypeError(f"player marks must start with different characters, got {marks}")
    return marks


def parse_moves(value: str) -> List[int]:
    """argparse type for --moves, e.g. '0,0,1,1'."""
    try:
        return [int(col) for col in value.split(',') if col.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"moves must be comma-separated integers, got {value!r}")


class SimpleCLI:
    """Simple command-line interface for connectn."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.input = input_func
        self.output = output_func
        self.args: Optional[argparse.Namespace] = None
        self.timeline: Optional[GameTimeline] = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Gravity-drop N-in-a-row game')

        # Options shared by every command
        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Number of columns')
        common.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Number of rows')
        common.add_argument('--win-length', type=int, default=CONNECT_N,
                            help='Pieces in a row needed to win')
        common.add_argument('--players', type=parse_players, default=list(DEFAULT_PLAYER_MARKS),
                            help='Comma-separated player marks in turn order (e.g. R,Y,B)')
        common.add_argument('--allow-play-after-win', action='store_true',
                            help='Keep accepting moves after someone has won')
        common.add_argument('--debug', action='store_true', help='Enable debug logging')
        common.add_argument('--debug-level', default=None,
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', parents=[common], help='Play a game interactively')

        replay_parser = subparsers.add_parser('replay', parents=[common],
                                              help='Play a fixed sequence of columns')
        replay_parser.add_argument('--moves', type=parse_moves, required=True,
                                   help='Comma-separated column sequence, e.g. 0,0,1,1')

        return parser

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments and apply the logging options."""
        self.args = self.build_parser().parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)

        return self.args

    def new_timeline(self) -> GameTimeline:
        return GameTimeline(
            width=self.args.width,
            height=self.args.height,
            win_length=self.args.win_length,
            player_marks=self.args.players,
            block_after_win=not self.args.allow_play_after_win,
        )

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """
        Run the command selected on the command line.

        Returns:
            Process exit status
        """
        if self.args is None:
            self.parse_args(argv)

        if self.args.command not in ('play', 'replay'):
            self.output("Please specify a command. Use --help for options.")
            return 1

        try:
            self.timeline = self.new_timeline()
        except ConnectNError as e:
            debug.error(f"Cannot start game: {e}", "cli")
            self.output(f"Cannot start game: {e}")
            return 2

        if self.args.command == 'play':
            self.play_game()
        else:
            self.replay(self.args.moves)
        return 0

    def show(self) -> None:
        self.output(self.timeline.render())
        self.output(status_line(self.timeline))

    def play_column(self, column: int) -> MoveOutcome:
        """Forward one column to the engine and report a refused move."""
        outcome = self.timeline.play(column)
        if not outcome.is_success():
            self.output(OUTCOME_MESSAGES[outcome].format(column=column))
        return outcome

    def replay(self, columns: Sequence[int]) -> None:
        """Play a column sequence, printing each accepted position."""
        for column in columns:
            mark = self.timeline.current_player()
            if self.play_column(column).is_success():
                self.output(f"{player_name(mark)} plays column {column}")
                self.output(self.timeline.render())

        self.output(status_line(self.timeline))

    def show_history(self) -> None:
        for index in range(self.timeline.history_length):
            cursor = "*" if index == self.timeline.current_move else " "
            if index == 0:
                self.output(f"{cursor} 0: game start")
            else:
                move = self.timeline.moves[index - 1]
                self.output(f"{cursor} {index}: {player_name(move.mark)} in column {move.column}")

    def handle_command(self, command: str) -> bool:
        """
        Apply one line of user input.

        Returns:
            False when the user asked to quit, True otherwise
        """
        parts = command.strip().lower().split()
        if not parts:
            return True

        verb = parts[0]
        if verb == 'q':
            self.output("Quitting game.")
            return False
        elif verb == 'u':
            if not self.timeline.undo():
                self.output("No moves to undo.")
        elif verb == 'f':
            if not self.timeline.redo():
                self.output("No moves to redo.")
        elif verb == 'r':
            self.timeline.restart()
            self.output("Game restarted.")
        elif verb == 'h':
            self.show_history()
            return True
        elif verb == 'j':
            try:
                index = int(parts[1]) if len(parts) == 2 else None
            except ValueError:
                index = None
            if index is None:
                self.output("Usage: j N")
                return True
            try:
                self.timeline.jump_to(index)
            except ConnectNError as e:
                self.output(str(e))
                return True
        else:
            try:
                column = int(verb)
            except ValueError:
                self.output(f"Unknown command {verb!r}. {HELP_TEXT}")
                return True
            if not self.play_column(column).is_success():
                return True

        self.show()
        return True

    def play_game(self) -> None:
        """Play a game interactively until the user quits or input ends."""
        self.output(f"Starting a new game: {self.timeline.width}x{self.timeline.height}, "
                    f"{self.timeline.win_length} in a row wins.")
        self.output(HELP_TEXT)
        self.show()

        while True:
            prompt = f"{player_name(self.timeline.current_player())} [0-{self.timeline.width - 1}]: "
            try:
                command = self.input(prompt)
            except EOFError:
                self.output("")
                return

            if not self.handle_command(command):
                return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
