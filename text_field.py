from typing import Tuple


class TextField:
    def __init__(self, title: str, text: str = ""):
        self.title = title
        self.buffer = text
        self.cursor = len(text)
        self.hscroll = 0

    @property
    def text(self) -> str:
        return self.buffer

    def set_text(self, text: str):
        self.buffer = text or ""
        self.cursor = len(self.buffer)
        self.hscroll = 0

    def insert(self, ch: str):
        if not ch:
            return
        self.buffer = self.buffer[: self.cursor] + ch + self.buffer[self.cursor :]
        self.cursor += len(ch)

    def backspace(self):
        if self.cursor > 0:
            self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
            self.cursor -= 1

    def move_left(self):
        self.cursor = max(0, self.cursor - 1)

    def move_right(self):
        self.cursor = min(len(self.buffer), self.cursor + 1)

    def move_home(self):
        self.cursor = 0

    def move_end(self):
        self.cursor = len(self.buffer)

    def visible(self, width: int) -> Tuple[str, int]:
        """Return the slice that fits in ``width`` columns and the cursor column within it."""
        text_w = max(1, width)

        # adjust hscroll
        if self.cursor < self.hscroll:
            self.hscroll = self.cursor
        elif self.cursor > self.hscroll + text_w:
            self.hscroll = self.cursor - text_w

        start = self.hscroll
        end = start + text_w
        return self.buffer[start:end], self.cursor - self.hscroll
