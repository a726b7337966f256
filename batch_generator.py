import logging
import os
import sys
from typing import List, Union

import pandas as pd

from asset_generator import (
    BlockRequest,
    GenerationError,
    GenerationResult,
    ItemRequest,
    generate_block,
    generate_item,
)

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("kind", "identifier")
_TRUE = {"1", "true", "t", "yes", "y", "on"}
_FALSE = {"0", "false", "f", "no", "n", "off"}


class BatchError(ValueError):
    pass


def coerce_flag(value, default: bool) -> bool:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return default
    if isinstance(value, bool):
        return value
    stripped = str(value).strip()
    if stripped == "":
        return default
    lowered = stripped.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"Cannot coerce '{value}' to boolean")


class BatchGenerator:
    SUPPORTED = {".csv", ".xlsx"}

    def __init__(self, path: str, config: dict, output_dir: str = None):
        self.path = path
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()
        if self.ext not in self.SUPPORTED:
            raise BatchError("Unsupported file type (use .csv or .xlsx)")

        self.config = config
        self.output_dir = output_dir or config.get("OUTPUT_DIR", ".")
        self.lang_code = config.get("LANG_CODE", "en_us")
        self.overwrite = bool(config.get("OVERWRITE", False))

    def load(self) -> pd.DataFrame:
        if not os.path.exists(self.path):
            raise BatchError(f"No such file: {self.path}")

        if self.ext == ".csv":
            try:
                df = pd.read_csv(self.path, dtype=str, keep_default_na=False)
            except pd.errors.EmptyDataError:
                df = pd.DataFrame(columns=list(REQUIRED_COLUMNS))
        else:
            self._ensure_excel_engine()
            df = pd.read_excel(self.path, dtype=str).fillna("")

        df.columns = [str(c).strip().lower() for c in df.columns]
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise BatchError(f"Missing column(s): {', '.join(missing)}")
        return df

    def requests(self, df: pd.DataFrame) -> List[Union[ItemRequest, BlockRequest]]:
        item_defaults = self.config.get("ITEM_DEFAULTS", {})
        block_defaults = self.config.get("BLOCK_DEFAULTS", {})
        fallback_ns = self.config.get("NAMESPACE", "modid")

        out = []
        for pos, row in enumerate(df.to_dict(orient="records"), start=2):
            kind = str(row.get("kind", "")).strip().lower()
            namespace = str(row.get("namespace") or "").strip() or fallback_ns
            identifier = str(row.get("identifier") or "").strip()
            display_name = str(row.get("display_name") or "").strip()
            try:
                if kind == "item":
                    out.append(
                        ItemRequest(
                            namespace=namespace,
                            identifier=identifier,
                            display_name=display_name,
                            handheld=coerce_flag(row.get("handheld"), item_defaults.get("handheld", False)),
                            lang=coerce_flag(row.get("lang"), item_defaults.get("lang", True)),
                        )
                    )
                elif kind == "block":
                    out.append(
                        BlockRequest(
                            namespace=namespace,
                            identifier=identifier,
                            display_name=display_name,
                            lang=coerce_flag(row.get("lang"), block_defaults.get("lang", True)),
                            loot_table=coerce_flag(row.get("loot_table"), block_defaults.get("loot_table", True)),
                        )
                    )
                else:
                    raise BatchError(f"Row {pos}: unknown kind '{kind}' (use item or block)")
            except ValueError as e:
                if isinstance(e, BatchError):
                    raise
                raise BatchError(f"Row {pos}: {e}") from e
        return out

    def generate(self, request) -> GenerationResult:
        if isinstance(request, BlockRequest):
            return generate_block(request, self.output_dir, self.lang_code, self.overwrite)
        return generate_item(request, self.output_dir, self.lang_code, self.overwrite)

    def run(self, out=None) -> int:
        out = out or sys.stdout
        try:
            requests = self.requests(self.load())
        except BatchError as e:
            logger.error("Batch %s rejected: %s", self.path, e)
            print(f"Batch failed: {e}", file=sys.stderr)
            return 1

        failures = 0
        for request in requests:
            kind = "block" if isinstance(request, BlockRequest) else "item"
            label = f"{kind} {request.namespace}:{request.identifier}"
            try:
                result = self.generate(request)
            except (GenerationError, OSError) as e:
                failures += 1
                logger.error("Batch %s failed: %s", label, e)
                print(f"{label}: failed: {e}", file=out)
                continue
            print(f"{label}: {result.summary()}", file=out)

        print(f"{len(requests) - failures}/{len(requests)} entries generated", file=out)
        return 1 if failures else 0

    def _ensure_excel_engine(self):
        try:
            import openpyxl  # noqa: F401

            return
        except ImportError:
            pass
        raise BatchError("XLSX support requires openpyxl. Install via: pip install openpyxl")
