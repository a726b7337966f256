import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: key hints (2 lines), body (main), status bar (1 line)
        self.hint_h = 2
        self.status_h = 1

        self.body_h = max(1, self.H - self.hint_h - self.status_h)

        self.hint_win = curses.newwin(self.hint_h, self.W, 0, 0)
        # hints never own cursor
        self.hint_win.leaveok(True)

        self.body_win = curses.newwin(self.body_h, self.W, self.hint_h, 0)

        self.status_win = curses.newwin(self.status_h, self.W, self.hint_h + self.body_h, 0)
        # do not let status bar steal cursor
        self.status_win.leaveok(True)
