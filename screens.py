import curses
from typing import List, Optional, Tuple

from focus import Focus, Screen

Segment = Tuple[str, bool]  # (text, bold)

HIGHLIGHT_SYMBOL = ">> "


def _press(*keys_and_text) -> List[Segment]:
    """_press("e", "to edit") -> [("Press ", False), ("e ", True), ("to edit", False)]"""
    segments: List[Segment] = [("Press ", False)]
    for i, part in enumerate(keys_and_text):
        if i % 2 == 0:
            segments.append((f"{part} ", True))
        else:
            segments.append((part, False))
    return segments


def hint_lines(state) -> List[List[Segment]]:
    focus = state.focus
    if focus in (Focus.NAMESPACE_EDIT, Focus.ITEM_FIELDS, Focus.BLOCK_FIELDS):
        lines = [_press("Esc", "or ", "Enter", "to stop editing.")]
        if focus is not Focus.NAMESPACE_EDIT:
            lines.append(_press("Tab", "to switch between identifier and display name."))
        return lines
    if focus is Focus.MAIN_MENU:
        return [
            _press("Esc", "to leave the menu."),
            [("Press arrow ", False), ("up ", True), ("or ", False), ("down ", True),
             ("to select an option, ", False), ("Enter ", True), ("to open it.", False)],
        ]
    if focus in (Focus.ITEM_OPTIONS, Focus.BLOCK_OPTIONS):
        return [
            _press("Esc", "to stop editing options."),
            [("Press arrow ", False), ("up ", True), ("or ", False), ("down ", True),
             ("to move, ", False), ("space ", True), ("to toggle.", False)],
        ]
    if state.screen is Screen.MAIN_MENU:
        return [
            _press("e", "to edit your namespace."),
            _press("m", "to use the menu, ", "?", "for help, ", "q", "to quit."),
        ]
    return [
        _press("e", "to edit names, ", "m", "to edit options."),
        _press("g", "to generate, ", "b", "to go back, ", "?", "for help."),
    ]


def _italic():
    return getattr(curses, "A_ITALIC", curses.A_DIM)


def _put(win, y, x, text, width, attr=0):
    if width <= 0:
        return
    try:
        win.addnstr(y, x, text, width, attr)
    except curses.error:
        pass


def draw_hints(win, state):
    win.erase()
    _, w = win.getmaxyx()
    for y, segments in enumerate(hint_lines(state)):
        x = 0
        for text, bold in segments:
            _put(win, y, x, text, w - x - 1, curses.A_BOLD if bold else 0)
            x += len(text)
            if x >= w - 1:
                break
    win.refresh()


def _draw_field(win, y, field, active: bool, width: int) -> Optional[Tuple[int, int]]:
    prefix = " > "
    _put(win, y, 1, field.title, width - 2, curses.A_BOLD if active else curses.A_DIM)
    visible, cursor_col = field.visible(max(1, width - len(prefix) - 3))
    _put(win, y + 1, 1, prefix + visible, width - 2, curses.A_UNDERLINE if active else 0)
    if active:
        return y + 1, 1 + len(prefix) + cursor_col
    return None


def _draw_list(win, y, title, options, active: bool, width: int, render_entry) -> int:
    h, _ = win.getmaxyx()
    _put(win, y, 1, title, width - 2, curses.A_BOLD if active else 0)
    y += 1
    highlighted = options.highlighted_index()
    for idx, entry in enumerate(options):
        if y >= h - 1:
            break
        is_hl = idx == highlighted
        marker = HIGHLIGHT_SYMBOL if is_hl else " " * len(HIGHLIGHT_SYMBOL)
        attr = curses.A_REVERSE if (is_hl and active) else 0
        for line_no, (text, italic) in enumerate(render_entry(entry)):
            if y >= h - 1:
                break
            lead = marker if line_no == 0 else " " * len(marker)
            _put(win, y, 1, lead + text, width - 2, attr | (_italic() if italic else 0))
            y += 1
    return y


def _menu_entry(entry):
    return [(entry.label, False), (f"   {entry.description}", True)]


def _toggle_entry(entry):
    return [(f"{entry.checkbox} {entry.label}", False), (f"    {entry.description}", True)]


def draw_main_menu(win, state) -> Optional[Tuple[int, int]]:
    win.erase()
    _, w = win.getmaxyx()
    cursor = _draw_field(win, 0, state.namespace, state.focus is Focus.NAMESPACE_EDIT, w)
    _draw_list(
        win, 3, "Select an option", state.main_options,
        state.focus is Focus.MAIN_MENU, w, _menu_entry,
    )
    win.refresh()
    return cursor


def _draw_sub_screen(win, state, title, fields, fields_focus, options, options_focus):
    win.erase()
    _, w = win.getmaxyx()
    namespace = state.namespace.text or "-"
    _put(win, 0, 1, f"{title} in namespace '{namespace}'", w - 2, curses.A_BOLD)

    cursor = None
    y = 2
    highlighted = fields.highlighted_index()
    for idx, field in enumerate(fields):
        active = state.focus is fields_focus and idx == highlighted
        pos = _draw_field(win, y, field, active, w)
        if pos is not None:
            cursor = pos
        y += 3

    _draw_list(win, y, "Options", options, state.focus is options_focus, w, _toggle_entry)
    win.refresh()
    return cursor


def draw_item_menu(win, state):
    return _draw_sub_screen(
        win, state, "Create Item",
        state.item_fields, Focus.ITEM_FIELDS, state.item_options, Focus.ITEM_OPTIONS,
    )


def draw_block_menu(win, state):
    return _draw_sub_screen(
        win, state, "Create Block",
        state.block_fields, Focus.BLOCK_FIELDS, state.block_options, Focus.BLOCK_OPTIONS,
    )


SCREEN_RENDERERS = {
    Screen.MAIN_MENU: draw_main_menu,
    Screen.ITEM_MENU: draw_item_menu,
    Screen.BLOCK_MENU: draw_block_menu,
}
