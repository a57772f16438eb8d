import curses
import logging
import random
import sys
import time
from typing import Callable, Optional

from termsnake.config import ConfigError, Settings, configure_logging, load_settings
from termsnake.domain.board import Board, TerminalTooSmallError
from termsnake.domain.constants import QUIT, RESTART, VALID_MOVES
from termsnake.domain.game_state import GAME_OVER, QUITTING, GameState
from termsnake.domain.speed import tick_delay_ms
from termsnake.players.base import Player
from termsnake.players.keyboard_player import KeyboardPlayer
from termsnake.services.renderer import TerminalRenderer, build_palette
from termsnake.services.terminal import TerminalSession

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (fixed for the whole session)
      - The current round's GameState
      - The player feeding commands
      - The renderer drawing frames
      - Tick pacing (speed curve)
      - Session best score
    """
    def __init__(
        self,
        board: Board,
        player: Player,
        renderer: TerminalRenderer,
        settings: Optional[Settings] = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
    ):
        self.board = board
        self.player = player
        self.renderer = renderer
        self.settings = settings or Settings()
        self.sleep = sleep
        self.rng = rng or random.Random()
        self.best_score = 0
        self.rounds_played = 0
        self.state = self._new_round()

    def _new_round(self) -> GameState:
        self.rounds_played += 1
        state = GameState.new_round(self.board)
        logger.info(
            "Round %d started: snake at %s heading %s",
            self.rounds_played, state.snake.head, state.snake.head_dir
        )
        return state

    def restart(self):
        self.state = self._new_round()

    def run(self) -> GameState:
        """
        Tick until the player quits. Returns the state of the last round;
        terminal teardown is left to the caller.
        """
        while self.state.status != QUITTING:
            self.run_tick()
        logger.info(
            "Quit after %d round(s), last score %d, best %d",
            self.rounds_played, self.state.score, self.best_score
        )
        return self.state

    def run_tick(self):
        """
        Execute one tick:
          1) If playing: reposition a dirty target, draw the frame
          2) Poll and apply one command
          3) If playing: move the snake, eating the target if it is next
          4) End the round on self-collision
          5) Sleep according to the speed curve
        """
        state = self.state

        if state.playing:
            if state.target.dirty:
                self._respawn_target(state)
            if state.playing:
                self.renderer.draw_frame(state, self.best_score)

        command = self.player.get_move(state)
        restarted = self.apply_command(command)
        if self.state.status == QUITTING:
            return

        if state.playing and not restarted:
            self._move_snake(state)
            if state.snake.check_failure():
                self._end_round(state, "self")

        self.sleep(self.current_delay_ms() / 1000)

    def apply_command(self, command: Optional[str]) -> bool:
        """
        Apply one player command to the current state.

        Returns:
            True if the command started a new round
        """
        state = self.state
        if command is None:
            return False

        if command == QUIT:
            logger.info("Quit requested")
            state.status = QUITTING
        elif command == RESTART:
            if state.status == GAME_OVER:
                logger.info("Restart requested after score %d", state.score)
                self.restart()
                return True
        elif command in VALID_MOVES:
            if state.playing and not state.snake.set_direction(command):
                logger.debug("Ignored turn %s while heading %s", command, state.snake.head_dir)
        else:
            logger.warning("Unknown command from player: %r", command)
        return False

    def current_delay_ms(self) -> int:
        return tick_delay_ms(
            self.state.score,
            min_delay=self.settings.min_delay_ms,
            max_delay=self.settings.max_delay_ms,
        )

    def _respawn_target(self, state: GameState):
        placed = state.target.respawn(
            self.board, state.snake, rng=self.rng, max_attempts=self.settings.spawn_attempts
        )
        if not placed:
            self._end_round(state, "board_full")

    def _move_snake(self, state: GameState):
        snake, target = state.snake, state.target
        new_head = snake.next_head(self.board)

        if new_head == target.cell:
            snake.grow(self.board)
            snake.score += 1
            target.dirty = True
            self.best_score = max(self.best_score, snake.score)
            logger.debug("Ate target at %s, score %d", new_head, snake.score)
        else:
            snake.advance(self.board)

        state.tick += 1

    def _end_round(self, state: GameState, reason: str):
        state.status = GAME_OVER
        state.end_reason = reason
        self.best_score = max(self.best_score, state.score)
        self.renderer.draw_game_over(state)
        logger.info("Game Over (%s) after %d ticks, score %d", reason, state.tick, state.score)
        logger.debug("Final board:\n%s", state.print_board())


def main() -> int:
    try:
        settings = load_settings()
        configure_logging(settings)
    except (ConfigError, OSError) as e:
        print(f"termsnake: {e}", file=sys.stderr)
        return 1

    try:
        with TerminalSession() as session:
            board = Board.from_terminal_size(*session.size())
            renderer = TerminalRenderer(session.window, board, palette=build_palette())
            player = KeyboardPlayer(session.window, poll_timeout_ms=settings.poll_timeout_ms)
            game = SnakeGame(board, player, renderer, settings=settings)
            game.run()
    except TerminalTooSmallError as e:
        print(f"termsnake: {e}", file=sys.stderr)
        return 1
    except (curses.error, OSError) as e:
        logger.exception("Terminal failure")
        print(f"termsnake: terminal error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
