import io
import json
import tempfile
import unittest
from pathlib import Path

import pandas as pd

from asset_generator import BlockRequest, ItemRequest
from batch_generator import BatchError, BatchGenerator, coerce_flag
import config_paths


def _config(**overrides):
    cfg = {
        "NAMESPACE": "modid",
        "OUTPUT_DIR": ".",
        "LANG_CODE": "en_us",
        "OVERWRITE": False,
        "ITEM_DEFAULTS": dict(config_paths.ITEM_DEFAULTS),
        "BLOCK_DEFAULTS": dict(config_paths.BLOCK_DEFAULTS),
    }
    cfg.update(overrides)
    return cfg


class CoerceFlagTests(unittest.TestCase):
    def test_truthy_and_falsy_spellings(self):
        for text in ("1", "true", "Yes", " on "):
            self.assertTrue(coerce_flag(text, False))
        for text in ("0", "FALSE", "no", "off"):
            self.assertFalse(coerce_flag(text, True))

    def test_blank_uses_default(self):
        self.assertTrue(coerce_flag("", True))
        self.assertFalse(coerce_flag(None, False))
        self.assertTrue(coerce_flag(float("nan"), True))

    def test_garbage_raises(self):
        with self.assertRaises(ValueError):
            coerce_flag("maybe", True)


class BatchGeneratorTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.out = self.tmp / "out"

    def tearDown(self):
        self._tmp.cleanup()

    def _csv(self, df: pd.DataFrame) -> str:
        path = self.tmp / "items.csv"
        df.to_csv(path, index=False)
        return str(path)

    def test_unsupported_extension(self):
        with self.assertRaises(BatchError):
            BatchGenerator(str(self.tmp / "items.txt"), _config())

    def test_missing_file(self):
        gen = BatchGenerator(str(self.tmp / "nope.csv"), _config())
        with self.assertRaises(BatchError):
            gen.load()

    def test_missing_required_column(self):
        path = self._csv(pd.DataFrame({"identifier": ["ruby"]}))
        with self.assertRaises(BatchError) as ctx:
            BatchGenerator(path, _config()).load()
        self.assertIn("kind", str(ctx.exception))

    def test_rows_become_requests_with_defaults(self):
        df = pd.DataFrame(
            {
                "Kind": ["item", "block", "item"],
                "identifier": ["ruby", "ruby_ore", "ruby_sword"],
                "namespace": ["", "gems", ""],
                "display_name": ["Ruby", "", ""],
                "handheld": ["", "", "yes"],
                "lang": ["", "no", ""],
            }
        )
        gen = BatchGenerator(self._csv(df), _config())
        requests = gen.requests(gen.load())

        self.assertEqual(
            requests,
            [
                ItemRequest("modid", "ruby", "Ruby", handheld=False, lang=True),
                BlockRequest("gems", "ruby_ore", "", lang=False, loot_table=True),
                ItemRequest("modid", "ruby_sword", "", handheld=True, lang=True),
            ],
        )

    def test_unknown_kind_reports_row(self):
        df = pd.DataFrame({"kind": ["item", "entity"], "identifier": ["a", "b"]})
        gen = BatchGenerator(self._csv(df), _config())
        with self.assertRaises(BatchError) as ctx:
            gen.requests(gen.load())
        self.assertIn("Row 3", str(ctx.exception))

    def test_bad_flag_reports_row(self):
        df = pd.DataFrame({"kind": ["item"], "identifier": ["a"], "handheld": ["maybe"]})
        gen = BatchGenerator(self._csv(df), _config())
        with self.assertRaises(BatchError) as ctx:
            gen.requests(gen.load())
        self.assertIn("Row 2", str(ctx.exception))

    def test_run_writes_files_and_counts_failures(self):
        df = pd.DataFrame(
            {
                "kind": ["item", "block", "item"],
                "identifier": ["ruby", "ruby_ore", "Bad Name"],
            }
        )
        gen = BatchGenerator(self._csv(df), _config(), str(self.out))
        buf = io.StringIO()
        rc = gen.run(out=buf)

        self.assertEqual(rc, 1)
        self.assertTrue((self.out / "assets/modid/models/item/ruby.json").exists())
        self.assertTrue((self.out / "assets/modid/blockstates/ruby_ore.json").exists())
        lang = json.loads((self.out / "assets/modid/lang/en_us.json").read_text(encoding="utf-8"))
        self.assertEqual(lang, {"item.modid.ruby": "Ruby", "block.modid.ruby_ore": "Ruby Ore"})
        self.assertIn("2/3 entries generated", buf.getvalue())

    def test_run_succeeds_for_clean_sheet(self):
        df = pd.DataFrame({"kind": ["item"], "identifier": ["ruby"]})
        gen = BatchGenerator(self._csv(df), _config(), str(self.out))
        self.assertEqual(gen.run(out=io.StringIO()), 0)


if __name__ == "__main__":
    unittest.main()
