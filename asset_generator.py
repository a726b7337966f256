"""Build and write the JSON files that define an item or a block.

Paths follow the resource/data pack layout::

    assets/<ns>/models/item/<id>.json
    assets/<ns>/models/block/<id>.json
    assets/<ns>/blockstates/<id>.json
    assets/<ns>/lang/<lang_code>.json
    data/<ns>/loot_tables/blocks/<id>.json
"""

import json
import logging
import os
import re
from dataclasses import dataclass, field
from typing import Dict, List

logger = logging.getLogger(__name__)

_NAMESPACE_RE = re.compile(r"^[a-z0-9_.-]+$")
_IDENTIFIER_RE = re.compile(r"^[a-z0-9_./-]+$")
_ALNUM_RE = re.compile(r"[a-z0-9]")


class GenerationError(ValueError):
    pass


@dataclass
class ItemRequest:
    namespace: str
    identifier: str
    display_name: str = ""
    handheld: bool = False
    lang: bool = True


@dataclass
class BlockRequest:
    namespace: str
    identifier: str
    display_name: str = ""
    lang: bool = True
    loot_table: bool = True


@dataclass
class GenerationResult:
    written: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    def summary(self) -> str:
        text = f"Generated {len(self.written)} file{'s' if len(self.written) != 1 else ''}"
        if self.skipped:
            text += f" ({len(self.skipped)} skipped, already exist)"
        return text


@dataclass
class AssetBundle:
    files: Dict[str, dict] = field(default_factory=dict)
    lang_path: str = ""
    lang_entries: Dict[str, str] = field(default_factory=dict)


def validate_names(namespace: str, identifier: str):
    if not namespace:
        raise GenerationError("Namespace is empty")
    if not _NAMESPACE_RE.match(namespace):
        raise GenerationError(
            f"Invalid namespace '{namespace}': use lowercase letters, digits, '_', '-' or '.'"
        )
    if not identifier:
        raise GenerationError("Identifier is empty")
    if not _ALNUM_RE.search(namespace):
        raise GenerationError(f"Invalid namespace '{namespace}'")
    if not _IDENTIFIER_RE.match(identifier):
        raise GenerationError(
            f"Invalid identifier '{identifier}': use lowercase letters, digits, '_', '-', '.' or '/'"
        )
    # identifiers become relative paths: every segment needs a letter or digit
    for segment in identifier.split("/"):
        if not _ALNUM_RE.search(segment):
            raise GenerationError(f"Invalid identifier '{identifier}': bad path segment '{segment}'")


def default_display_name(identifier: str) -> str:
    base = identifier.rsplit("/", 1)[-1]
    words = [w for w in re.split(r"[_.\-]+", base) if w]
    return " ".join(w.capitalize() for w in words)


def _lang_path(namespace: str, lang_code: str) -> str:
    return f"assets/{namespace}/lang/{lang_code}.json"


def build_item_assets(request: ItemRequest, lang_code: str = "en_us") -> AssetBundle:
    ns, ident = request.namespace, request.identifier
    validate_names(ns, ident)

    parent = "minecraft:item/handheld" if request.handheld else "minecraft:item/generated"
    bundle = AssetBundle()
    bundle.files[f"assets/{ns}/models/item/{ident}.json"] = {
        "parent": parent,
        "textures": {"layer0": f"{ns}:item/{ident}"},
    }
    if request.lang:
        bundle.lang_path = _lang_path(ns, lang_code)
        bundle.lang_entries[f"item.{ns}.{ident}"] = (
            request.display_name or default_display_name(ident)
        )
    return bundle


def build_block_assets(request: BlockRequest, lang_code: str = "en_us") -> AssetBundle:
    ns, ident = request.namespace, request.identifier
    validate_names(ns, ident)

    model_ref = f"{ns}:block/{ident}"
    bundle = AssetBundle()
    bundle.files[f"assets/{ns}/blockstates/{ident}.json"] = {
        "variants": {"": {"model": model_ref}},
    }
    bundle.files[f"assets/{ns}/models/block/{ident}.json"] = {
        "parent": "minecraft:block/cube_all",
        "textures": {"all": model_ref},
    }
    bundle.files[f"assets/{ns}/models/item/{ident}.json"] = {"parent": model_ref}
    if request.loot_table:
        bundle.files[f"data/{ns}/loot_tables/blocks/{ident}.json"] = {
            "type": "minecraft:block",
            "pools": [
                {
                    "rolls": 1,
                    "entries": [{"type": "minecraft:item", "name": f"{ns}:{ident}"}],
                    "conditions": [{"condition": "minecraft:survives_explosion"}],
                }
            ],
        }
    if request.lang:
        bundle.lang_path = _lang_path(ns, lang_code)
        bundle.lang_entries[f"block.{ns}.{ident}"] = (
            request.display_name or default_display_name(ident)
        )
    return bundle


def _dump(path: str, payload):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
        f.write("\n")


def _load_lang(path: str) -> Dict[str, str]:
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            existing = json.load(f)
    except json.JSONDecodeError as e:
        raise GenerationError(f"Cannot merge into {path}: {e}") from e
    if not isinstance(existing, dict):
        raise GenerationError(f"Cannot merge into {path}: not a JSON object")
    return existing


def _resolve(output_dir: str, rel_path: str) -> str:
    path = os.path.join(output_dir, rel_path)
    root = os.path.realpath(output_dir)
    if os.path.commonpath([root, os.path.realpath(path)]) != root:
        raise GenerationError(f"Refusing to write outside {output_dir}: {rel_path}")
    return path


def write_assets(bundle: AssetBundle, output_dir: str, overwrite: bool = False) -> GenerationResult:
    # resolve and read everything before the first write
    targets = [(_resolve(output_dir, rel), payload) for rel, payload in bundle.files.items()]
    lang = None
    if bundle.lang_entries:
        lang_path = _resolve(output_dir, bundle.lang_path)
        merged = _load_lang(lang_path)
        merged.update(bundle.lang_entries)
        lang = (lang_path, merged)

    result = GenerationResult()
    for path, payload in targets:
        if os.path.exists(path) and not overwrite:
            logger.info("Skipping existing %s", path)
            result.skipped.append(path)
            continue
        _dump(path, payload)
        result.written.append(path)

    if lang is not None:
        _dump(*lang)
        result.written.append(lang[0])

    logger.info("Wrote %d files under %s (%d skipped)", len(result.written), output_dir, len(result.skipped))
    return result


def generate_item(request: ItemRequest, output_dir: str, lang_code: str = "en_us", overwrite: bool = False) -> GenerationResult:
    return write_assets(build_item_assets(request, lang_code), output_dir, overwrite)


def generate_block(request: BlockRequest, output_dir: str, lang_code: str = "en_us", overwrite: bool = False) -> GenerationResult:
    return write_assets(build_block_assets(request, lang_code), output_dir, overwrite)
