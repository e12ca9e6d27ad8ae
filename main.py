"""
Main console driver for Tic Tac Toe.

This script ties together:
- Logic (board, move rules, win detection, turn order)
- UI (board text, prompts, messages)

Run this script to play Tic Tac Toe in a terminal. Without an
interactive terminal it plays a short scripted demo instead.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional, Tuple

import ui
from logic.config import GameConfig
from logic.match_controller import MatchController

logger = logging.getLogger(__name__)


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse "row,col" into two integers.

    Range is not checked here; the match controller rejects
    out-of-range coordinates itself.

    Returns:
        (row, col), or None if the text is not two comma-separated integers.
    """
    parts = text.split(",")
    if len(parts) != 2:
        return None
    try:
        return int(parts[0].strip()), int(parts[1].strip())
    except ValueError:
        return None


class ConsoleGame:
    """
    Console front end for a MatchController.

    Game flow:
    1. Show the board and ask the current player for a move
    2. Re-prompt on bad input or a taken cell without using up the turn
    3. When the match ends, show the result and offer a rematch
    """

    def __init__(
        self,
        controller: Optional[MatchController] = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ):
        """
        Args:
            controller: The match to drive (default: a fresh MatchController).
            input_func: Reads one line after showing a prompt.
            output: Writes one message.
        """
        self.controller = controller or MatchController()
        self.input_func = input_func
        self.output = output

    def play(self) -> int:
        """
        Run interactive matches until the players stop.

        Returns:
            Process exit code.
        """
        self.output(ui.WELCOME)

        while True:
            if not self._play_match():
                break
            if not self._ask_play_again():
                break
            self.controller.reset()
            self.output(ui.NEW_GAME)

        self.output(ui.GOODBYE)
        return 0

    def _play_match(self) -> bool:
        """Play until the match ends. Returns False if input ran out."""
        controller = self.controller

        while not controller.is_over:
            self._show_board()
            text = self._read(ui.move_prompt(controller.current_player))
            if text is None:
                return False

            move = parse_move(text)
            if move is None:
                self.output(ui.INVALID_INPUT)
                continue

            result = controller.attempt_move(*move)
            if not result:
                self.output(ui.rejection_message(result.error))

        self._show_board()
        self.output(ui.result_message(controller.winner))
        return True

    def _ask_play_again(self) -> bool:
        answer = self._read(ui.PLAY_AGAIN)
        return answer is not None and answer.strip().lower() == "yes"

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self.input_func(prompt)
        except EOFError:
            logger.debug("Input closed")
            self.output("")
            return None

    def _show_board(self):
        self.output(ui.format_board(self.controller.render()))

    def run_demo(self, moves: Optional[List[Tuple[int, int]]] = None) -> int:
        """
        Play a fixed sequence of moves without reading input.

        Args:
            moves: (row, col) moves to play (default: GameConfig.DEMO_MOVES).

        Returns:
            Process exit code.
        """
        controller = self.controller
        if moves is None:
            moves = controller.config.DEMO_MOVES

        self.output(ui.DEMO_BANNER)
        self._show_board()

        for row, col in moves:
            player = controller.current_player
            self.output(ui.demo_move(player, row, col))

            result = controller.attempt_move(row, col)
            if not result:
                logger.warning("Demo move (%s, %s) rejected: %s", row, col, result.message)
                self.output(ui.rejection_message(result.error))
                continue

            self._show_board()
            if controller.is_over:
                self.output(ui.result_message(controller.winner))
                break

        return 0


def is_interactive(stream=None) -> bool:
    """True if an interactive terminal is attached to the input stream."""
    stream = stream if stream is not None else sys.stdin
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Console Tic Tac Toe")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--demo",
        action="store_true",
        help="Play the scripted demo instead of prompting"
    )
    mode.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for moves even if stdin is not a terminal"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Decided once, before any game starts
    interactive = args.interactive or (not args.demo and is_interactive())
    logger.debug("Starting in %s mode", "interactive" if interactive else "demo")

    game = ConsoleGame(MatchController(GameConfig()))

    try:
        if interactive:
            return game.play()
        return game.run_demo()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        print("Goodbye!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
