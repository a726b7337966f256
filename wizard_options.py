from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class MenuOption:
    label: str
    description: str


@dataclass
class ToggleOption:
    key: str
    label: str
    description: str
    enabled: bool = False

    def toggle(self):
        self.enabled = not self.enabled

    @property
    def checkbox(self) -> str:
        return "[x]" if self.enabled else "[ ]"


MAIN_MENU_ENTRIES = [
    MenuOption("Create Item", "Generates JSON files for an item."),
    MenuOption("Create Block", "Generates JSON files for a block."),
]


def main_menu_options() -> List[MenuOption]:
    return list(MAIN_MENU_ENTRIES)


def item_toggle_options(handheld: bool = False, lang: bool = True) -> List[ToggleOption]:
    return [
        ToggleOption(
            "handheld",
            "Handheld",
            "Whether your item inherits handheld properties ('generated' is default).",
            handheld,
        ),
        ToggleOption(
            "lang",
            "Generate lang file",
            "A lang json file will be generated with the translation for your item.",
            lang,
        ),
    ]


def block_toggle_options(lang: bool = True, loot_table: bool = True) -> List[ToggleOption]:
    return [
        ToggleOption(
            "lang",
            "Generate lang file",
            "A lang json file will be generated with the translation for your block.",
            lang,
        ),
        ToggleOption(
            "loot_table",
            "Generate loot table",
            "The block drops itself when mined.",
            loot_table,
        ),
    ]


def enabled_keys(options) -> set[str]:
    return {opt.key for opt in options if opt.enabled}
