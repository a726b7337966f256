"""Screens, input focus, and the table that maps (screen, focus, key) to the next focus.

``transition`` is pure: it never touches application state. It answers with the
focus to switch to and a tuple of actions; ``InputDispatcher`` carries them out.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from key_events import Key, KeyEvent


class Screen(Enum):
    MAIN_MENU = "main"
    ITEM_MENU = "item"
    BLOCK_MENU = "block"


class Focus(Enum):
    NEUTRAL = "neutral"
    NAMESPACE_EDIT = "namespace"
    MAIN_MENU = "main_menu"
    ITEM_OPTIONS = "item_options"
    ITEM_FIELDS = "item_fields"
    BLOCK_OPTIONS = "block_options"
    BLOCK_FIELDS = "block_fields"


class Effect(Enum):
    SELECT_FIRST = "select_first"
    NEXT = "next"
    PREVIOUS = "previous"
    ACTIVATE = "activate"
    TOGGLE = "toggle"
    INSERT = "insert"
    DELETE_BACK = "delete_back"
    CURSOR_LEFT = "cursor_left"
    CURSOR_RIGHT = "cursor_right"
    CURSOR_HOME = "cursor_home"
    CURSOR_END = "cursor_end"
    GENERATE = "generate"
    GO_BACK = "go_back"
    HELP = "help"
    QUIT = "quit"


# AppState attribute names an action can point at
NAMESPACE = "namespace"
MAIN_OPTIONS = "main_options"
ITEM_OPTIONS = "item_options"
ITEM_FIELDS = "item_fields"
BLOCK_OPTIONS = "block_options"
BLOCK_FIELDS = "block_fields"


@dataclass(frozen=True)
class Action:
    effect: Effect
    target: Optional[str] = None


@dataclass(frozen=True)
class Transition:
    focus: Focus
    actions: Tuple[Action, ...] = ()


Trigger = Union[Key, str]


def _text_rules(focus: Focus, target: str, cycle_fields: bool = False) -> Dict[Trigger, Transition]:
    rules = {
        Key.CHAR: Transition(focus, (Action(Effect.INSERT, target),)),
        Key.BACKSPACE: Transition(focus, (Action(Effect.DELETE_BACK, target),)),
        Key.LEFT: Transition(focus, (Action(Effect.CURSOR_LEFT, target),)),
        Key.RIGHT: Transition(focus, (Action(Effect.CURSOR_RIGHT, target),)),
        Key.HOME: Transition(focus, (Action(Effect.CURSOR_HOME, target),)),
        Key.END: Transition(focus, (Action(Effect.CURSOR_END, target),)),
        Key.ENTER: Transition(Focus.NEUTRAL),
    }
    if cycle_fields:
        rules[Key.TAB] = Transition(focus, (Action(Effect.NEXT, target),))
        rules[Key.DOWN] = Transition(focus, (Action(Effect.NEXT, target),))
        rules[Key.UP] = Transition(focus, (Action(Effect.PREVIOUS, target),))
    return rules


def _list_rules(focus: Focus, target: str) -> Dict[Trigger, Transition]:
    return {
        Key.DOWN: Transition(focus, (Action(Effect.NEXT, target),)),
        Key.UP: Transition(focus, (Action(Effect.PREVIOUS, target),)),
    }


def _options_rules(focus: Focus, target: str) -> Dict[Trigger, Transition]:
    rules = _list_rules(focus, target)
    rules[" "] = Transition(focus, (Action(Effect.TOGGLE, target),))
    return rules


def _sub_screen_neutral(fields_focus: Focus, fields: str, options_focus: Focus, options: str):
    return {
        "e": Transition(fields_focus, (Action(Effect.SELECT_FIRST, fields),)),
        "m": Transition(options_focus, (Action(Effect.SELECT_FIRST, options),)),
        "g": Transition(Focus.NEUTRAL, (Action(Effect.GENERATE),)),
        "b": Transition(Focus.NEUTRAL, (Action(Effect.GO_BACK),)),
        "?": Transition(Focus.NEUTRAL, (Action(Effect.HELP),)),
        "q": Transition(Focus.NEUTRAL, (Action(Effect.QUIT),)),
    }


_main_menu_rules = _list_rules(Focus.MAIN_MENU, MAIN_OPTIONS)
_main_menu_rules[Key.ENTER] = Transition(Focus.MAIN_MENU, (Action(Effect.ACTIVATE, MAIN_OPTIONS),))

TRANSITIONS: Dict[Tuple[Screen, Focus], Dict[Trigger, Transition]] = {
    (Screen.MAIN_MENU, Focus.NEUTRAL): {
        "e": Transition(Focus.NAMESPACE_EDIT),
        "m": Transition(Focus.MAIN_MENU, (Action(Effect.SELECT_FIRST, MAIN_OPTIONS),)),
        "?": Transition(Focus.NEUTRAL, (Action(Effect.HELP),)),
        "q": Transition(Focus.NEUTRAL, (Action(Effect.QUIT),)),
    },
    (Screen.MAIN_MENU, Focus.NAMESPACE_EDIT): _text_rules(Focus.NAMESPACE_EDIT, NAMESPACE),
    (Screen.MAIN_MENU, Focus.MAIN_MENU): _main_menu_rules,
    (Screen.ITEM_MENU, Focus.NEUTRAL): _sub_screen_neutral(
        Focus.ITEM_FIELDS, ITEM_FIELDS, Focus.ITEM_OPTIONS, ITEM_OPTIONS
    ),
    (Screen.ITEM_MENU, Focus.ITEM_FIELDS): _text_rules(Focus.ITEM_FIELDS, ITEM_FIELDS, cycle_fields=True),
    (Screen.ITEM_MENU, Focus.ITEM_OPTIONS): _options_rules(Focus.ITEM_OPTIONS, ITEM_OPTIONS),
    (Screen.BLOCK_MENU, Focus.NEUTRAL): _sub_screen_neutral(
        Focus.BLOCK_FIELDS, BLOCK_FIELDS, Focus.BLOCK_OPTIONS, BLOCK_OPTIONS
    ),
    (Screen.BLOCK_MENU, Focus.BLOCK_FIELDS): _text_rules(Focus.BLOCK_FIELDS, BLOCK_FIELDS, cycle_fields=True),
    (Screen.BLOCK_MENU, Focus.BLOCK_OPTIONS): _options_rules(Focus.BLOCK_OPTIONS, BLOCK_OPTIONS),
}


def transition(screen: Screen, focus: Focus, event: KeyEvent) -> Transition:
    # quit and escape win over every screen-specific rule
    if event.key is Key.QUIT:
        return Transition(focus, (Action(Effect.QUIT),))
    if event.key is Key.ESCAPE:
        return Transition(Focus.NEUTRAL)

    rules = TRANSITIONS.get((screen, focus), {})
    if event.key is Key.CHAR and event.char in rules:
        return rules[event.char]
    found = rules.get(event.key)
    if found is not None:
        return found
    return Transition(focus)
