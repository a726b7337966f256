class ShortcutHelpHandler:
    LINES = [
        "modwiz - key bindings",
        "",
        "Everywhere",
        "  Esc            stop editing / leave a menu",
        "  Ctrl+C Ctrl+X  quit",
        "",
        "Nothing focused",
        "  e              edit namespace (main) or identifier/display name",
        "  m              open the menu (main) or the option list",
        "  g              generate the JSON files (item/block screens)",
        "  b              back to the main menu (item/block screens)",
        "  ?              this help",
        "  q              quit",
        "",
        "Menus and option lists",
        "  Up / Down      move the highlight (wraps around)",
        "  Enter          open the highlighted entry (main menu)",
        "  Space          toggle the highlighted option",
        "",
        "Text fields",
        "  Left Right Home End   move the cursor",
        "  Backspace      delete before the cursor",
        "  Tab Up Down    switch between identifier and display name",
        "  Enter          finish editing",
        "",
        "Help: j/k scroll, q/Esc/Enter/? close",
    ]

    @classmethod
    def get_lines(cls):
        return list(cls.LINES)
