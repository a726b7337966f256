import logging
from typing import Callable, Optional

from focus import Action, Effect, Screen, Transition, transition
from key_events import KeyEvent, decode_key
from selectable_list import SelectableList

logger = logging.getLogger(__name__)


class InputDispatcher:
    """Feeds key events through ``focus.transition`` and applies the resulting actions to AppState."""

    def __init__(
        self,
        state,
        generate_cb: Optional[Callable[[], None]] = None,
        help_cb: Optional[Callable[[], None]] = None,
        quit_cb: Optional[Callable[[], None]] = None,
    ):
        self.state = state
        self._generate_cb = generate_cb
        self._help_cb = help_cb
        self._quit_cb = quit_cb

    def handle_key(self, ch) -> Optional[Transition]:
        event = decode_key(ch)
        if event is None:
            return None
        return self.handle_event(event)

    def handle_event(self, event: KeyEvent) -> Transition:
        result = transition(self.state.screen, self.state.focus, event)
        self.state.set_focus(result.focus)
        for action in result.actions:
            self._apply(action, event)
        return result

    # ---------- actions ----------
    def _apply(self, action: Action, event: KeyEvent):
        effect = action.effect
        target = getattr(self.state, action.target) if action.target else None

        if effect is Effect.SELECT_FIRST:
            target.set_first()
        elif effect is Effect.NEXT:
            target.wrap_next()
        elif effect is Effect.PREVIOUS:
            target.wrap_previous()
        elif effect is Effect.ACTIVATE:
            self._activate_main_menu(target.highlighted_index())
        elif effect is Effect.TOGGLE:
            option = target.highlighted()
            if option is not None:
                option.toggle()
        elif effect in _TEXT_EFFECTS:
            field = self._text_target(target)
            if field is not None:
                _TEXT_EFFECTS[effect](field, event)
        elif effect is Effect.GO_BACK:
            self.state.navigate(Screen.MAIN_MENU)
        elif effect is Effect.GENERATE:
            self._call(self._generate_cb)
        elif effect is Effect.HELP:
            self._call(self._help_cb)
        elif effect is Effect.QUIT:
            self._call(self._quit_cb)

    def _activate_main_menu(self, index: Optional[int]):
        if index is None:
            return
        if index == 0:
            self.state.navigate(Screen.ITEM_MENU)
        elif index == 1:
            self.state.navigate(Screen.BLOCK_MENU)
        logger.debug("Main menu activated index %s -> %s", index, self.state.screen.value)

    @staticmethod
    def _text_target(target):
        # field lists edit their highlighted entry
        if isinstance(target, SelectableList):
            return target.highlighted()
        return target

    @staticmethod
    def _call(cb):
        if cb is not None:
            cb()


_TEXT_EFFECTS = {
    Effect.INSERT: lambda field, event: field.insert(event.char or ""),
    Effect.DELETE_BACK: lambda field, event: field.backspace(),
    Effect.CURSOR_LEFT: lambda field, event: field.move_left(),
    Effect.CURSOR_RIGHT: lambda field, event: field.move_right(),
    Effect.CURSOR_HOME: lambda field, event: field.move_home(),
    Effect.CURSOR_END: lambda field, event: field.move_end(),
}
