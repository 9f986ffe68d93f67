#!/usr/bin/env python3
"""
Snake Game — Terminal snake with curses and incremental redraws.
Features:
- Arrow keys / WASD movement, no 180 degree turns
- Normal food (*, +10) and rare special food ($, +50)
- Level and speed increase every 100 points
- Pause with 'p', restart with 'r' after game over
- Only cells that changed are redrawn each tick (no full-screen repaint)
- High score tracking per session
"""

import argparse
import collections
import curses
import logging
import random
import signal
import sys
import time

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

BOARD_WIDTH = 30
BOARD_HEIGHT = 20
MIN_BOARD_WIDTH = 20
MIN_BOARD_HEIGHT = 12

# Screen position of board cell (0, 0): left border column, then the
# three banner rows and the top border.
BOARD_LEFT = 1
BOARD_TOP = 4
PANEL_GAP = 3           # columns between the right border and the side panel
PANEL_WIDTH = 30
STATS_TOP = BOARD_TOP + 1
CONTROLS_TOP = STATS_TOP + 7
LEGEND_TOP = CONTROLS_TOP + 9
PANEL_BOTTOM = LEGEND_TOP + 3

BASE_INTERVAL_MS = 200
INTERVAL_STEP_MS = 15
MIN_INTERVAL_MS = 50
PAUSED_INTERVAL_MS = 100
POINTS_PER_LEVEL = 100

NORMAL_FOOD_VALUE = 10
SPECIAL_FOOD_VALUE = 50
SPECIAL_FOOD_CHANCE = 10     # one in N foods is special
FOOD_PLACEMENT_RETRIES = 1000

# Directions: (dx, dy). A heading of None means the snake has not started.
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)

OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

HEAD_GLYPHS = {UP: "^", DOWN: "v", LEFT: "<", RIGHT: ">", None: "@"}
BODY_GLYPH = "o"
NORMAL_FOOD_GLYPH = "*"
SPECIAL_FOOD_GLYPH = "$"
BLANK = " "

PAUSE_TEXT = " PAUSED - press P to resume "
SHORT_PAUSE_TEXT = " PAUSED "
GAME_OVER_PROMPT = ("Press 'R' to restart", "or 'Q' to quit")

# Color pair IDs
COLOR_BORDER = 1
COLOR_HEAD = 2
COLOR_BODY = 3
COLOR_FOOD = 4
COLOR_SPECIAL_FOOD = 5
COLOR_TITLE = 6
COLOR_STATS = 7
COLOR_CONTROLS = 8
COLOR_TEXT = 9
COLOR_PAUSED = 10
COLOR_GAMEOVER = 11

# Color pair ID -> (foreground, bold)
COLOR_TABLE = {
    COLOR_BORDER: (curses.COLOR_CYAN, False),
    COLOR_HEAD: (curses.COLOR_GREEN, True),
    COLOR_BODY: (curses.COLOR_GREEN, False),
    COLOR_FOOD: (curses.COLOR_RED, True),
    COLOR_SPECIAL_FOOD: (curses.COLOR_YELLOW, True),
    COLOR_TITLE: (curses.COLOR_CYAN, True),
    COLOR_STATS: (curses.COLOR_YELLOW, False),
    COLOR_CONTROLS: (curses.COLOR_MAGENTA, True),
    COLOR_TEXT: (curses.COLOR_WHITE, False),
    COLOR_PAUSED: (curses.COLOR_YELLOW, True),
    COLOR_GAMEOVER: (curses.COLOR_RED, True),
}

# Key mappings
KEY_MAP = {
    curses.KEY_UP: UP, ord('w'): UP, ord('W'): UP,
    curses.KEY_DOWN: DOWN, ord('s'): DOWN, ord('S'): DOWN,
    curses.KEY_LEFT: LEFT, ord('a'): LEFT, ord('A'): LEFT,
    curses.KEY_RIGHT: RIGHT, ord('d'): RIGHT, ord('D'): RIGHT,
}
PAUSE_KEYS = (ord('p'), ord('P'))
QUIT_KEYS = (ord('q'), ord('Q'))
RESTART_KEYS = (ord('r'), ord('R'))

# Game states
STATE_WELCOME = "welcome"
STATE_PLAYING = "playing"
STATE_PAUSED = "paused"
STATE_GAME_OVER = "game_over"
STATE_TERMINATED = "terminated"


# ---------------------------------------------------------------------------
# Grid model
# ---------------------------------------------------------------------------

Position = collections.namedtuple("Position", ["x", "y"])

INITIAL_BODY = (Position(10, 10), Position(9, 10), Position(8, 10))


def step(pos, direction):
    """Return the cell one step from pos in the given direction."""
    return Position(pos.x + direction[0], pos.y + direction[1])


def level_for_score(score):
    return score // POINTS_PER_LEVEL + 1


def tick_interval_ms(level):
    """Milliseconds between ticks at a level, floored at MIN_INTERVAL_MS."""
    return max(MIN_INTERVAL_MS, BASE_INTERVAL_MS - level * INTERVAL_STEP_MS)


def required_screen_size(width, height):
    """Return the (columns, rows) needed for the board and side panel."""
    cols = BOARD_LEFT + width + 1 + PANEL_GAP + PANEL_WIDTH
    rows = max(BOARD_TOP + height + 2, PANEL_BOTTOM + 1)
    return cols, rows


# ---------------------------------------------------------------------------
# Snake
# ---------------------------------------------------------------------------

class Snake:
    """Snake body as a list of cells, head first.

    previous_body is the body as it was right before the last move; the
    renderer diffs against it to find the cells the tail vacated.
    Growth is deferred: grow() arms a flag that the next move() consumes
    by keeping the tail, so the length goes up one tick after eating.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.body = list(INITIAL_BODY)
        self.previous_body = list(self.body)
        self.direction = None
        self.growing = False

    @property
    def head(self):
        return self.body[0]

    def __len__(self):
        return len(self.body)

    def set_direction(self, direction):
        """Change heading unless it reverses the current one.

        The first heading from the idle state is always accepted.
        Returns True if the heading was accepted.
        """
        if self.direction is not None and direction == OPPOSITE[self.direction]:
            return False
        self.direction = direction
        return True

    def move(self):
        if self.direction is None:
            return
        self.previous_body = list(self.body)
        self.body.insert(0, step(self.head, self.direction))
        if self.growing:
            self.growing = False
        else:
            self.body.pop()

    def grow(self):
        self.growing = True

    def check_self_collision(self):
        return self.head in self.body[1:]


# ---------------------------------------------------------------------------
# Food
# ---------------------------------------------------------------------------

class BoardFullError(RuntimeError):
    """Raised when there is no free cell left to place food on."""


class Food:
    def __init__(self, position, special=False):
        self.position = position
        self.special = special
        if special:
            self.symbol = SPECIAL_FOOD_GLYPH
            self.color = COLOR_SPECIAL_FOOD
            self.value = SPECIAL_FOOD_VALUE
        else:
            self.symbol = NORMAL_FOOD_GLYPH
            self.color = COLOR_FOOD
            self.value = NORMAL_FOOD_VALUE

    def __repr__(self):
        return f"Food({self.position!r}, special={self.special})"

    @classmethod
    def generate(cls, width, height, occupied, rng=random):
        """Place new food on a random cell of the board outside occupied.

        Samples random cells first; after FOOD_PLACEMENT_RETRIES misses it
        picks from the enumerated free cells instead. Raises BoardFullError
        if every cell is occupied.
        """
        occupied = set(occupied)
        for _ in range(FOOD_PLACEMENT_RETRIES):
            pos = Position(rng.randrange(width), rng.randrange(height))
            if pos not in occupied:
                break
        else:
            free = [Position(x, y) for y in range(height) for x in range(width)
                    if Position(x, y) not in occupied]
            if not free:
                raise BoardFullError(f"no free cell on a {width}x{height} board")
            logger.debug("Food sampling missed %d times, choosing from %d free cells",
                         FOOD_PLACEMENT_RETRIES, len(free))
            pos = rng.choice(free)
        special = rng.randrange(SPECIAL_FOOD_CHANCE) == 0
        return cls(pos, special)


# ---------------------------------------------------------------------------
# Terminal adapter
# ---------------------------------------------------------------------------

class Terminal:
    """Display and keyboard capabilities the game draws through.

    Keys are integers: letters as ord() values and arrows as the
    curses.KEY_* codes, already assembled from any escape sequence.
    """

    def poll_key(self):
        """Return the next pending key without blocking, or None."""
        raise NotImplementedError

    def wait_key(self):
        """Block until a key is pressed and return it."""
        raise NotImplementedError

    def set_cursor(self, x, y):
        raise NotImplementedError

    def set_color(self, color):
        raise NotImplementedError

    def write(self, text):
        """Write text at the cursor and advance the cursor past it."""
        raise NotImplementedError

    def clear_screen(self):
        raise NotImplementedError

    def hide_cursor(self):
        raise NotImplementedError

    def show_cursor(self):
        raise NotImplementedError

    def flush(self):
        """Push everything written so far to the display."""

    def size(self):
        """Return the display size as (columns, rows)."""
        raise NotImplementedError

    def sleep_ms(self, duration):
        time.sleep(duration / 1000)


def init_colors():
    """Initialize one curses color pair per entry in COLOR_TABLE."""
    curses.start_color()
    curses.use_default_colors()
    for pair, (fg, _bold) in COLOR_TABLE.items():
        curses.init_pair(pair, fg, -1)


class CursesTerminal(Terminal):
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.x = 0
        self.y = 0
        self.attr = curses.A_NORMAL
        self.has_colors = curses.has_colors()
        if self.has_colors:
            init_colors()
        stdscr.keypad(True)
        stdscr.nodelay(True)
        self.hide_cursor()

    def poll_key(self):
        ch = self.stdscr.getch()
        return None if ch == -1 else ch

    def wait_key(self):
        # Drop keys pressed before the prompt appeared
        while self.stdscr.getch() != -1:
            pass
        self.stdscr.nodelay(False)
        try:
            ch = -1
            while ch == -1:
                ch = self.stdscr.getch()
        finally:
            self.stdscr.nodelay(True)
        return ch

    def set_cursor(self, x, y):
        self.x = x
        self.y = y

    def set_color(self, color):
        _fg, bold = COLOR_TABLE[color]
        attr = curses.color_pair(color) if self.has_colors else curses.A_NORMAL
        if bold:
            attr |= curses.A_BOLD
        self.attr = attr

    def write(self, text):
        try:
            self.stdscr.addstr(self.y, self.x, text, self.attr)
        except curses.error:
            # Off-window writes and the bottom-right cell are not drawable
            pass
        self.x += len(text)

    def clear_screen(self):
        self.stdscr.clear()
        self.stdscr.refresh()

    def hide_cursor(self):
        try:
            curses.curs_set(0)
        except curses.error:
            pass

    def show_cursor(self):
        try:
            curses.curs_set(1)
        except curses.error:
            pass

    def flush(self):
        self.stdscr.refresh()

    def size(self):
        rows, cols = self.stdscr.getmaxyx()
        return cols, rows


def put_text(terminal, x, y, text, color):
    terminal.set_color(color)
    terminal.set_cursor(x, y)
    terminal.write(text)


# ---------------------------------------------------------------------------
# Board rendering
# ---------------------------------------------------------------------------

class Board:
    """Board bounds and the incremental renderer for one terminal.

    The last_* fields remember what is currently on screen so each frame
    only rewrites what changed. reset_diff_state() forgets all of it,
    which forces a full redraw on the next frame after a screen clear.
    """

    def __init__(self, terminal, width=BOARD_WIDTH, height=BOARD_HEIGHT):
        self.terminal = terminal
        self.width = width
        self.height = height
        self.panel_x = BOARD_LEFT + width + 1 + PANEL_GAP
        self.reset_diff_state()

    def reset_diff_state(self):
        self.border_drawn = False
        self.header_drawn = False
        self.last_score = None
        self.last_high_score = None
        self.last_length = None
        self.last_level = None
        self.last_paused = False

    def is_valid_position(self, pos):
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def put_cell(self, pos, glyph, color=None):
        if not self.is_valid_position(pos):
            return
        if color is not None:
            self.terminal.set_color(color)
        self.terminal.set_cursor(BOARD_LEFT + pos.x, BOARD_TOP + pos.y)
        self.terminal.write(glyph)

    def erase_cell(self, pos):
        self.put_cell(pos, BLANK)

    def draw_border(self):
        if self.border_drawn:
            return
        edge = "+" + "-" * self.width + "+"
        put_text(self.terminal, BOARD_LEFT - 1, BOARD_TOP - 1, edge, COLOR_BORDER)
        for row in range(self.height):
            self.terminal.set_cursor(BOARD_LEFT - 1, BOARD_TOP + row)
            self.terminal.write("|")
            self.terminal.set_cursor(BOARD_LEFT + self.width, BOARD_TOP + row)
            self.terminal.write("|")
        put_text(self.terminal, BOARD_LEFT - 1, BOARD_TOP + self.height, edge, COLOR_BORDER)
        self.border_drawn = True

    def draw_header(self):
        """Draw the banner and the static parts of the side panel."""
        if self.header_drawn:
            return
        banner_width = self.panel_x + PANEL_WIDTH
        rule = "+" + "=" * (banner_width - 2) + "+"
        put_text(self.terminal, 0, 0, rule, COLOR_TITLE)
        put_text(self.terminal, 0, 1, "|" + "SNAKE GAME".center(banner_width - 2) + "|", COLOR_TITLE)
        put_text(self.terminal, 0, 2, rule, COLOR_TITLE)

        x = self.panel_x
        put_text(self.terminal, x, STATS_TOP, panel_rule(" STATS "), COLOR_STATS)
        put_text(self.terminal, x, STATS_TOP + 5, panel_rule(), COLOR_STATS)

        put_text(self.terminal, x, CONTROLS_TOP, panel_rule(" CONTROLS "), COLOR_CONTROLS)
        controls = [
            "W/UP    - Move Up",
            "S/DOWN  - Move Down",
            "A/LEFT  - Move Left",
            "D/RIGHT - Move Right",
            "P       - Pause Game",
            "Q       - Quit Game",
        ]
        for i, line in enumerate(controls):
            put_text(self.terminal, x, CONTROLS_TOP + 1 + i, panel_line(line), COLOR_TEXT)
        put_text(self.terminal, x, CONTROLS_TOP + 7, panel_rule(), COLOR_CONTROLS)

        put_text(self.terminal, x, LEGEND_TOP, panel_rule(" FOOD TYPES "), COLOR_BORDER)
        for i, (glyph, color, label) in enumerate([
                (NORMAL_FOOD_GLYPH, COLOR_FOOD, f"Normal Food (+{NORMAL_FOOD_VALUE})"),
                (SPECIAL_FOOD_GLYPH, COLOR_SPECIAL_FOOD, f"Special Food (+{SPECIAL_FOOD_VALUE})")]):
            row = LEGEND_TOP + 1 + i
            put_text(self.terminal, x, row, panel_line(f"  - {label}"), COLOR_TEXT)
            put_text(self.terminal, x + 2, row, glyph, color)
        put_text(self.terminal, x, LEGEND_TOP + 3, panel_rule(), COLOR_BORDER)
        self.header_drawn = True

    def draw_snake(self, snake):
        current = set(snake.body)
        for pos in snake.previous_body:
            if pos not in current:
                self.erase_cell(pos)
        self.put_cell(snake.head, HEAD_GLYPHS[snake.direction], COLOR_HEAD)
        self.terminal.set_color(COLOR_BODY)
        for pos in snake.body[1:]:
            self.put_cell(pos, BODY_GLYPH)

    def draw_food(self, food):
        self.put_cell(food.position, food.symbol, food.color)

    def draw_stats(self, score, high_score, length, level):
        """Rewrite each stats row whose value differs from what is on screen."""
        rows = [
            ("last_score", "Score:", score),
            ("last_high_score", "High Score:", high_score),
            ("last_length", "Length:", length),
            ("last_level", "Level:", level),
        ]
        for i, (field, label, value) in enumerate(rows):
            if getattr(self, field) == value:
                continue
            put_text(self.terminal, self.panel_x, STATS_TOP + 1 + i,
                     panel_line(f"{label:<12}{value:>10}"), COLOR_TEXT)
            setattr(self, field, value)

    def draw_pause(self, paused):
        if paused == self.last_paused:
            return
        # Stay under the board so the side panel is never overwritten
        banner = PAUSE_TEXT if len(PAUSE_TEXT) <= self.width else SHORT_PAUSE_TEXT
        text = banner if paused else BLANK * len(banner)
        x = BOARD_LEFT + (self.width - len(banner)) // 2
        put_text(self.terminal, x, BOARD_TOP + self.height + 1, text, COLOR_PAUSED)
        self.last_paused = paused

    def draw_game_over(self, score, high_score, reason):
        x = BOARD_LEFT + max(0, (self.width - 20) // 2)
        y = BOARD_TOP + self.height // 2 - 4
        lines = [
            ("+==================+", COLOR_GAMEOVER),
            ("|    GAME  OVER!   |", COLOR_GAMEOVER),
            (f"|{reason:^18}|", COLOR_TEXT),
            ("+==================+", COLOR_GAMEOVER),
            (f"| Final Score:{score:>4} |", COLOR_TEXT),
            (f"| High Score: {high_score:>4} |", COLOR_TEXT),
            ("+==================+", COLOR_GAMEOVER),
        ]
        for i, (line, color) in enumerate(lines):
            put_text(self.terminal, x, y + i, line, color)
        for i, prompt in enumerate(GAME_OVER_PROMPT):
            px = BOARD_LEFT + max(0, (self.width - len(prompt)) // 2)
            put_text(self.terminal, px, y + len(lines) + 1 + i, prompt, COLOR_STATS)


def panel_rule(title=""):
    return "+" + title.center(PANEL_WIDTH - 2, "-") + "+"


def panel_line(text):
    return "| " + text.ljust(PANEL_WIDTH - 4) + " |"


# ---------------------------------------------------------------------------
# Game state machine
# ---------------------------------------------------------------------------

class Game:
    """One session: welcome screen, then rounds until the player quits."""

    def __init__(self, terminal, width=BOARD_WIDTH, height=BOARD_HEIGHT, rng=None):
        self.terminal = terminal
        self.board = Board(terminal, width, height)
        self.snake = Snake()
        self.rng = rng if rng is not None else random.Random()
        self.high_score = 0
        self.running = True
        self.started = False
        self.new_round()

    def new_round(self):
        self.snake.reset()
        self.score = 0
        self.game_over = False
        self.game_over_reason = ""
        self.paused = False
        self.eaten_food_position = None
        self.level = None
        self.update_game_speed()
        self.food = Food.generate(self.board.width, self.board.height,
                                  self.snake.body, self.rng)

    @property
    def state(self):
        if not self.running:
            return STATE_TERMINATED
        if not self.started:
            return STATE_WELCOME
        if self.game_over:
            return STATE_GAME_OVER
        if self.paused:
            return STATE_PAUSED
        return STATE_PLAYING

    def update_game_speed(self):
        level = level_for_score(self.score)
        label = f"Level {level}"
        if self.level is not None and label != self.level:
            logger.info("Reached %s", label)
        self.level = label
        self.interval_ms = tick_interval_ms(level)

    # -- input -------------------------------------------------------------

    def process_input(self):
        key = self.terminal.poll_key()
        if key is not None:
            self.handle_key(key)

    def handle_key(self, key):
        if not self.running or self.game_over:
            return
        if key in KEY_MAP:
            self.snake.set_direction(KEY_MAP[key])
        elif key in PAUSE_KEYS:
            self.paused = not self.paused
            logger.info("Game %s", "paused" if self.paused else "resumed")
        elif key in QUIT_KEYS:
            self.quit()

    # -- simulation --------------------------------------------------------

    def update(self):
        if self.game_over or self.paused:
            return
        self.eaten_food_position = None

        self.snake.move()
        self.update_game_speed()

        head = self.snake.head
        if not self.board.is_valid_position(head):
            self.end_round("Hit the wall")
            return
        if self.snake.check_self_collision():
            self.end_round("Bit yourself")
            return

        if head == self.food.position:
            self.score += self.food.value
            self.snake.grow()
            self.eaten_food_position = self.food.position
            logger.info("Ate %s food at %s, score %d",
                        "special" if self.food.special else "normal",
                        tuple(head), self.score)
            try:
                self.food = Food.generate(self.board.width, self.board.height,
                                          self.snake.body, self.rng)
            except BoardFullError:
                self.food = None
                self.end_round("Board full")

    def end_round(self, reason):
        self.game_over = True
        self.game_over_reason = reason
        self.high_score = max(self.high_score, self.score)
        logger.info("Game over: %s (score %d, length %d)",
                    reason, self.score, len(self.snake))

    # -- rendering ---------------------------------------------------------

    def render(self):
        board = self.board
        board.draw_border()
        board.draw_header()
        if self.eaten_food_position is not None:
            board.erase_cell(self.eaten_food_position)
        board.draw_snake(self.snake)
        if self.food is not None:
            board.draw_food(self.food)
        board.draw_stats(self.score, self.high_score, len(self.snake), self.level)
        board.draw_pause(self.paused)
        if self.game_over:
            board.draw_game_over(self.score, self.high_score, self.game_over_reason)
        self.terminal.flush()

    def show_welcome(self):
        self.terminal.clear_screen()
        self.terminal.hide_cursor()
        lines = [
            ("+================================================+", COLOR_TITLE),
            ("|                WELCOME TO SNAKE                |", COLOR_TITLE),
            ("+================================================+", COLOR_TITLE),
            ("|  INSTRUCTIONS:                                 |", COLOR_TEXT),
            ("|  * Use WASD or Arrow Keys to control snake     |", COLOR_TEXT),
            ("|  * Eat food (*) to grow and gain points        |", COLOR_TEXT),
            ("|  * Special food ($) gives bonus points         |", COLOR_TEXT),
            ("|  * Avoid hitting walls or yourself             |", COLOR_TEXT),
            ("|  * Press P to pause, Q to quit                 |", COLOR_TEXT),
            ("|  * Game speed increases with your score!       |", COLOR_TEXT),
            ("+================================================+", COLOR_TITLE),
            ("|        Press any key to start playing!         |", COLOR_STATS),
            ("+================================================+", COLOR_TITLE),
        ]
        for i, (line, color) in enumerate(lines):
            put_text(self.terminal, 2, 2 + i, line, color)
        self.terminal.flush()
        self.terminal.wait_key()
        self.started = True

    # -- transitions -------------------------------------------------------

    def handle_game_over(self):
        """Block for a restart or quit key while the round is over."""
        if not self.game_over:
            return
        self.high_score = max(self.high_score, self.score)
        key = self.terminal.wait_key()
        if key in RESTART_KEYS:
            self.restart()
        elif key in QUIT_KEYS:
            self.quit()

    def restart(self):
        self.new_round()
        self.terminal.clear_screen()
        self.board.reset_diff_state()
        logger.info("Restarted")

    def quit(self):
        self.running = False
        self.high_score = max(self.high_score, self.score)
        logger.info("Quit with score %d, high score %d", self.score, self.high_score)

    def tick(self):
        """One iteration of input, update, render and delay."""
        self.process_input()
        if not self.running:
            return
        self.update()
        self.render()
        if self.game_over:
            self.handle_game_over()
        elif self.paused:
            self.terminal.sleep_ms(PAUSED_INTERVAL_MS)
        else:
            self.terminal.sleep_ms(self.interval_ms)

    def run(self):
        self.show_welcome()
        self.terminal.clear_screen()
        while self.running:
            self.tick()
        self.high_score = max(self.high_score, self.score)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def show_too_small(terminal, need_cols, need_rows):
    cols, rows = terminal.size()
    terminal.clear_screen()
    put_text(terminal, 0, 0, "Terminal too small!", COLOR_STATS)
    put_text(terminal, 0, 1, f"Need at least {need_cols}x{need_rows}, got {cols}x{rows}", COLOR_STATS)
    put_text(terminal, 0, 2, "Press 'q' to quit", COLOR_STATS)
    terminal.flush()
    while terminal.wait_key() not in QUIT_KEYS:
        pass


def main(stdscr, options=None):
    if options is None:
        options = parse_args([])
    terminal = CursesTerminal(stdscr)
    try:
        need_cols, need_rows = required_screen_size(options.width, options.height)
        cols, rows = terminal.size()
        if cols < need_cols or rows < need_rows:
            logger.warning("Terminal is %dx%d, need %dx%d", cols, rows, need_cols, need_rows)
            show_too_small(terminal, need_cols, need_rows)
            return None
        logger.info("Starting %dx%d game with seed %s",
                    options.width, options.height, options.seed)
        game = Game(terminal, options.width, options.height, random.Random(options.seed))
        game.run()
        return game
    finally:
        terminal.show_cursor()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Terminal snake game.")
    parser.add_argument("--width", type=int, default=BOARD_WIDTH,
                        help=f"Board width in cells (default: {BOARD_WIDTH})")
    parser.add_argument("--height", type=int, default=BOARD_HEIGHT,
                        help=f"Board height in cells (default: {BOARD_HEIGHT})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement")
    parser.add_argument("--log-file", default=None,
                        help="Write a game log to this file")
    parser.add_argument("--debug", action="store_true",
                        help="Log debug messages (needs --log-file)")
    options = parser.parse_args(argv)
    if options.width < MIN_BOARD_WIDTH:
        parser.error(f"--width must be at least {MIN_BOARD_WIDTH}")
    if options.height < MIN_BOARD_HEIGHT:
        parser.error(f"--height must be at least {MIN_BOARD_HEIGHT}")
    return options


def configure_logging(options):
    # curses owns the terminal, so records only ever go to a file
    if options.log_file:
        logging.basicConfig(
            filename=options.log_file,
            level=logging.DEBUG if options.debug else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())


def _exit_on_signal(signum, frame):
    raise SystemExit(128 + signum)


def install_signal_handlers():
    """Turn termination signals into SystemExit so curses.wrapper cleans up."""
    for name in ("SIGTERM", "SIGHUP"):
        signum = getattr(signal, name, None)
        if signum is not None:
            signal.signal(signum, _exit_on_signal)


def run(argv=None):
    options = parse_args(argv)
    configure_logging(options)
    install_signal_handlers()
    try:
        game = curses.wrapper(main, options)
    except KeyboardInterrupt:
        return 0
    except curses.error as exc:
        logger.error("Terminal error: %s", exc)
        print(f"snake: cannot initialize terminal: {exc}", file=sys.stderr)
        return 1
    if game is not None:
        print("Thanks for playing Snake!")
        print(f"Final Score: {game.score}")
        print(f"High Score: {game.high_score}")
    return 0


if __name__ == "__main__":
    sys.exit(run())
