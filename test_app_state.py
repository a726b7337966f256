from app_state import AppState
from asset_generator import BlockRequest, ItemRequest
from focus import Focus, Screen


def test_defaults_come_from_config():
    state = AppState(
        {
            "NAMESPACE": "gems",
            "OUTPUT_DIR": "pack",
            "ITEM_DEFAULTS": {"handheld": True, "lang": False},
            "BLOCK_DEFAULTS": {"lang": False, "loot_table": False},
        }
    )
    assert state.namespace.text == "gems"
    assert state.output_dir == "pack"
    assert [o.enabled for o in state.item_options] == [True, False]
    assert [o.enabled for o in state.block_options] == [False, False]
    assert state.screen is Screen.MAIN_MENU
    assert state.focus is Focus.NEUTRAL
    assert state.main_options.highlighted_index() is None


def test_output_dir_argument_beats_config():
    assert AppState({"OUTPUT_DIR": "pack"}, "other").output_dir == "other"


def test_requests_reflect_fields_and_toggles():
    state = AppState()
    state.namespace.set_text(" gems ")
    state.item_fields.get(0).set_text("ruby")
    state.item_fields.get(1).set_text("Ruby Gem")
    state.item_options.get(0).toggle()

    assert state.item_request() == ItemRequest("gems", "ruby", "Ruby Gem", handheld=True, lang=True)

    state.block_fields.get(0).set_text("ruby_ore")
    state.block_options.get(1).toggle()
    assert state.block_request() == BlockRequest("gems", "ruby_ore", "", lang=True, loot_table=False)


def test_tick_counts():
    state = AppState()
    state.tick()
    state.tick()
    assert state.ticks == 2
