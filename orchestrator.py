import curses
import logging
import time

from asset_generator import GenerationError, generate_block, generate_item
from focus import Screen
from input_dispatcher import InputDispatcher
from overlay import OverlayView
from screen_layout import ScreenLayout
from screens import SCREEN_RENDERERS, draw_hints
from shortcut_help import ShortcutHelpHandler
from status_bar import render_status

logger = logging.getLogger(__name__)

TICK_MS = 250


class Orchestrator:
    def __init__(self, stdscr, app_state):
        self.stdscr = stdscr
        curses.curs_set(0)
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(TICK_MS)

        self.state = app_state
        self.layout = ScreenLayout(stdscr)

        self.overlay = OverlayView(self.layout)
        self.dispatcher = InputDispatcher(
            app_state,
            generate_cb=self.generate,
            help_cb=self.show_help,
            quit_cb=self.request_exit,
        )
        self.exit_requested = False

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0
        self._last_tick = time.monotonic()

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def request_exit(self):
        self.exit_requested = True

    def show_help(self):
        self.overlay.open(ShortcutHelpHandler.get_lines())

    def generate(self):
        state = self.state
        try:
            if state.screen is Screen.BLOCK_MENU:
                request = state.block_request()
                result = generate_block(request, state.output_dir, state.lang_code, state.overwrite)
            elif state.screen is Screen.ITEM_MENU:
                request = state.item_request()
                result = generate_item(request, state.output_dir, state.lang_code, state.overwrite)
            else:
                return
        except GenerationError as e:
            logger.warning("Generation rejected: %s", e)
            self._set_status(str(e)[: self.layout.W - 2], 4)
            return
        except OSError as e:
            logger.error("Generation failed: %s", e)
            self._set_status(f"Generate failed: {e}"[: self.layout.W - 2], 4)
            return
        logger.info("%s:%s -> %s", request.namespace, request.identifier, result.summary())
        self._set_status(result.summary(), 4)

    # ---------------- UI ----------------

    def redraw(self):
        if self.overlay.visible:
            try:
                curses.curs_set(0)
            except curses.error:
                pass
            self.overlay.draw()
            return

        draw_hints(self.layout.hint_win, self.state)

        renderer = SCREEN_RENDERERS[self.state.screen]
        cursor = renderer(self.layout.body_win, self.state)

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(
            {
                "status_msg": self.status_msg,
                "status_until": self.status_msg_until,
                "screen": self.state.screen,
                "focus": self.state.focus,
                "namespace": self.state.namespace.text,
                "output_dir": self.state.output_dir,
            },
            max(1, w - 1),
        )
        try:
            sw.addnstr(0, 0, text, max(1, w - 1), curses.A_REVERSE)
        except curses.error:
            pass
        sw.refresh()

        try:
            if cursor is not None:
                curses.curs_set(1)
                self.layout.body_win.move(*cursor)
                self.layout.body_win.refresh()
            else:
                curses.curs_set(0)
        except curses.error:
            pass

    # ---------------- main loop ----------------

    def _maybe_tick(self):
        now = time.monotonic()
        if (now - self._last_tick) * 1000 >= TICK_MS:
            self.state.tick()
            self._last_tick = now

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while not self.exit_requested:
            ch = self.stdscr.getch()

            if ch == -1:
                self._maybe_tick()
                self.redraw()
                continue

            if self.overlay.visible:
                if ch in (3, 24):
                    break
                self.overlay.handle_key(ch)
                if not self.overlay.visible:
                    self.stdscr.clear()
                    self.stdscr.refresh()
                self.redraw()
                continue

            self.dispatcher.handle_key(ch)
            self.redraw()
