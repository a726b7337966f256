import time

from focus import Focus, Screen

_SCREEN_LABELS = {
    Screen.MAIN_MENU: "MAIN",
    Screen.ITEM_MENU: "ITEM",
    Screen.BLOCK_MENU: "BLOCK",
}

_FOCUS_LABELS = {
    Focus.NEUTRAL: "",
    Focus.NAMESPACE_EDIT: "EDIT",
    Focus.MAIN_MENU: "MENU",
    Focus.ITEM_OPTIONS: "OPTIONS",
    Focus.ITEM_FIELDS: "EDIT",
    Focus.BLOCK_OPTIONS: "OPTIONS",
    Focus.BLOCK_FIELDS: "EDIT",
}


def mode_label(screen, focus) -> str:
    base = _SCREEN_LABELS.get(screen, "?")
    sub = _FOCUS_LABELS.get(focus, "")
    return f"{base}:{sub}" if sub else base


def render_status(context, width):
    """
    context keys: status_msg, status_until, screen, focus, namespace, output_dir
    """
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        mode = mode_label(context.get("screen"), context.get("focus"))
        namespace = context.get("namespace") or "-"
        output_dir = context.get("output_dir") or "."
        text = f" {mode} | ns: {namespace} | out: {output_dir} | ? help"

    return text.ljust(width)[:width]
