from asset_generator import BlockRequest, ItemRequest
from focus import Focus, Screen
from selectable_list import SelectableList
from text_field import TextField
from wizard_options import (
    MenuOption,
    ToggleOption,
    block_toggle_options,
    enabled_keys,
    item_toggle_options,
    main_menu_options,
)
import config_paths


class AppState:
    def __init__(self, config=None, output_dir=None):
        cfg = config if config is not None else {}
        item_defaults = cfg.get("ITEM_DEFAULTS", config_paths.ITEM_DEFAULTS)
        block_defaults = cfg.get("BLOCK_DEFAULTS", config_paths.BLOCK_DEFAULTS)

        self.output_dir = output_dir or cfg.get("OUTPUT_DIR", config_paths.OUTPUT_DIR_DEFAULT)
        self.lang_code = cfg.get("LANG_CODE", config_paths.LANG_CODE_DEFAULT)
        self.overwrite = bool(cfg.get("OVERWRITE", config_paths.OVERWRITE_DEFAULT))

        self.namespace = TextField(
            "Namespace", cfg.get("NAMESPACE", config_paths.NAMESPACE_DEFAULT)
        )

        self.main_options: SelectableList[MenuOption] = SelectableList(main_menu_options())
        self.item_options: SelectableList[ToggleOption] = SelectableList(
            item_toggle_options(
                handheld=item_defaults.get("handheld", False),
                lang=item_defaults.get("lang", True),
            )
        )
        self.item_fields: SelectableList[TextField] = SelectableList(
            [TextField("Identifier", "example"), TextField("Display Name")]
        )
        self.block_options: SelectableList[ToggleOption] = SelectableList(
            block_toggle_options(
                lang=block_defaults.get("lang", True),
                loot_table=block_defaults.get("loot_table", True),
            )
        )
        self.block_fields: SelectableList[TextField] = SelectableList(
            [TextField("Identifier", "example_block"), TextField("Display Name")]
        )

        self.screen = Screen.MAIN_MENU
        self.focus = Focus.NEUTRAL
        self.ticks = 0

    def navigate(self, screen: Screen):
        self.focus = Focus.NEUTRAL
        self.screen = screen
        options = self.options_for(screen)
        if options is not None:
            options.set_first()

    def set_focus(self, focus: Focus):
        self.focus = focus

    def options_for(self, screen: Screen):
        if screen is Screen.MAIN_MENU:
            return self.main_options
        if screen is Screen.ITEM_MENU:
            return self.item_options
        if screen is Screen.BLOCK_MENU:
            return self.block_options
        return None

    def fields_for(self, screen: Screen):
        if screen is Screen.ITEM_MENU:
            return self.item_fields
        if screen is Screen.BLOCK_MENU:
            return self.block_fields
        return None

    def field_text(self, fields, index: int) -> str:
        field = fields.get(index)
        return field.text.strip() if field is not None else ""

    def item_request(self) -> ItemRequest:
        keys = enabled_keys(self.item_options)
        return ItemRequest(
            namespace=self.namespace.text.strip(),
            identifier=self.field_text(self.item_fields, 0),
            display_name=self.field_text(self.item_fields, 1),
            handheld="handheld" in keys,
            lang="lang" in keys,
        )

    def block_request(self) -> BlockRequest:
        keys = enabled_keys(self.block_options)
        return BlockRequest(
            namespace=self.namespace.text.strip(),
            identifier=self.field_text(self.block_fields, 0),
            display_name=self.field_text(self.block_fields, 1),
            lang="lang" in keys,
            loot_table="loot_table" in keys,
        )

    def tick(self):
        self.ticks += 1
