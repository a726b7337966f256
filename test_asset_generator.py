import json

import pytest

from asset_generator import (
    AssetBundle,
    BlockRequest,
    GenerationError,
    ItemRequest,
    build_block_assets,
    build_item_assets,
    default_display_name,
    generate_block,
    generate_item,
    write_assets,
)


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_item_model_uses_generated_parent_by_default():
    bundle = build_item_assets(ItemRequest("modid", "ruby"))
    model = bundle.files["assets/modid/models/item/ruby.json"]
    assert model == {
        "parent": "minecraft:item/generated",
        "textures": {"layer0": "modid:item/ruby"},
    }
    assert bundle.lang_path == "assets/modid/lang/en_us.json"
    assert bundle.lang_entries == {"item.modid.ruby": "Ruby"}


def test_handheld_item_without_lang():
    bundle = build_item_assets(
        ItemRequest("modid", "ruby_sword", "Sword of Ruby", handheld=True, lang=False)
    )
    assert bundle.files["assets/modid/models/item/ruby_sword.json"]["parent"] == "minecraft:item/handheld"
    assert bundle.lang_entries == {}


def test_block_assets_cover_state_models_and_loot():
    bundle = build_block_assets(BlockRequest("modid", "ruby_ore"), "de_de")
    assert set(bundle.files) == {
        "assets/modid/blockstates/ruby_ore.json",
        "assets/modid/models/block/ruby_ore.json",
        "assets/modid/models/item/ruby_ore.json",
        "data/modid/loot_tables/blocks/ruby_ore.json",
    }
    assert bundle.files["assets/modid/blockstates/ruby_ore.json"] == {
        "variants": {"": {"model": "modid:block/ruby_ore"}}
    }
    loot = bundle.files["data/modid/loot_tables/blocks/ruby_ore.json"]
    assert loot["pools"][0]["entries"][0]["name"] == "modid:ruby_ore"
    assert bundle.lang_path == "assets/modid/lang/de_de.json"
    assert bundle.lang_entries == {"block.modid.ruby_ore": "Ruby Ore"}


def test_block_without_loot_table():
    bundle = build_block_assets(BlockRequest("modid", "ruby_ore", loot_table=False))
    assert not any(p.startswith("data/") for p in bundle.files)


@pytest.mark.parametrize(
    "namespace, identifier",
    [
        ("", "ruby"),
        ("modid", ""),
        ("Mod Id", "ruby"),
        ("modid", "Ruby"),
        ("modid", "ruby sword"),
        ("mod:id", "ruby"),
        ("..", "ruby"),
        ("modid", "../../../../escaped"),
        ("modid", "tools/../../escaped"),
        ("modid", "foo/"),
        ("modid", "..."),
        ("modid", "a//b"),
        ("modid", "./ruby"),
    ],
)
def test_invalid_names_are_rejected(namespace, identifier):
    with pytest.raises(GenerationError):
        build_item_assets(ItemRequest(namespace, identifier))


@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("ruby", "Ruby"),
        ("ruby_sword", "Ruby Sword"),
        ("tools/ruby-pick", "Ruby Pick"),
    ],
)
def test_default_display_name(identifier, expected):
    assert default_display_name(identifier) == expected


def test_generate_item_writes_files(tmp_path):
    result = generate_item(ItemRequest("modid", "ruby", "Ruby Gem"), str(tmp_path))
    model = tmp_path / "assets/modid/models/item/ruby.json"
    lang = tmp_path / "assets/modid/lang/en_us.json"
    assert str(model) in result.written
    assert str(lang) in result.written
    assert _read(model)["textures"]["layer0"] == "modid:item/ruby"
    assert _read(lang) == {"item.modid.ruby": "Ruby Gem"}
    assert model.read_text(encoding="utf-8").endswith("\n")


def test_lang_file_is_merged(tmp_path):
    lang = tmp_path / "assets/modid/lang/en_us.json"
    lang.parent.mkdir(parents=True)
    lang.write_text(json.dumps({"item.modid.old": "Old"}), encoding="utf-8")

    generate_block(BlockRequest("modid", "ruby_block", "Block of Ruby"), str(tmp_path))
    assert _read(lang) == {"item.modid.old": "Old", "block.modid.ruby_block": "Block of Ruby"}


def test_broken_lang_file_raises(tmp_path):
    lang = tmp_path / "assets/modid/lang/en_us.json"
    lang.parent.mkdir(parents=True)
    lang.write_text("{not json", encoding="utf-8")
    with pytest.raises(GenerationError):
        generate_item(ItemRequest("modid", "ruby"), str(tmp_path))
    assert not (tmp_path / "assets/modid/models/item/ruby.json").exists()
    assert lang.read_text(encoding="utf-8") == "{not json"


def test_existing_files_are_skipped_unless_overwrite(tmp_path):
    model = tmp_path / "assets/modid/models/item/ruby.json"
    model.parent.mkdir(parents=True)
    model.write_text("{}", encoding="utf-8")

    result = generate_item(ItemRequest("modid", "ruby", lang=False), str(tmp_path))
    assert result.written == []
    assert result.skipped == [str(model)]
    assert model.read_text(encoding="utf-8") == "{}"
    assert "1 skipped" in result.summary()

    result = generate_item(ItemRequest("modid", "ruby", lang=False), str(tmp_path), overwrite=True)
    assert result.written == [str(model)]
    assert _read(model)["parent"] == "minecraft:item/generated"


def test_escaping_identifier_writes_nothing(tmp_path):
    out = tmp_path / "out"
    with pytest.raises(GenerationError):
        generate_item(ItemRequest("modid", "../../../../../../escaped", lang=False), str(out))
    assert not (tmp_path / "escaped.json").exists()
    assert not out.exists()


def test_write_assets_refuses_paths_outside_output_dir(tmp_path):
    out = tmp_path / "out"
    bundle = AssetBundle(
        files={"assets/modid/models/item/ruby.json": {"parent": "minecraft:item/generated"}},
        lang_path="assets/modid/lang/../../../../x.json",
        lang_entries={"item.modid.ruby": "Ruby"},
    )
    with pytest.raises(GenerationError):
        write_assets(bundle, str(out))
    assert not (out / "assets/modid/models/item/ruby.json").exists()
    assert not (tmp_path / "x.json").exists()
