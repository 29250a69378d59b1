import json
import os
import sys
from typing import Optional, TextIO

import pandas as pd


class MappingWriter:
    """Serializes the finished mapping to stdout or to a file picked by extension."""

    SUPPORTED_EXTS = {".json", ".csv", ".parquet"}
    COLUMNS = ["key", "value"]

    def __init__(self, path: Optional[str] = None, indent: Optional[int] = None, sort_keys: bool = False):
        self.path = path
        self.indent = indent
        self.sort_keys = sort_keys
        self.ext = None

        if path is not None:
            _, ext = os.path.splitext(path)
            self.ext = ext.lower()
            if self.ext not in self.SUPPORTED_EXTS:
                raise ValueError(
                    f"Unsupported output type '{ext or path}' (use .json, .csv, or .parquet)"
                )
            if self.ext == ".parquet":
                self._ensure_parquet_engine()

    def describe(self) -> str:
        return self.path if self.path else "stdout"

    def to_json(self, mapping: dict[str, str]) -> str:
        if self.indent is None:
            # single line, no spaces after separators
            return json.dumps(mapping, ensure_ascii=False, sort_keys=self.sort_keys, separators=(",", ":"))
        return json.dumps(mapping, ensure_ascii=False, sort_keys=self.sort_keys, indent=self.indent)

    def to_frame(self, mapping: dict[str, str]) -> pd.DataFrame:
        rows = sorted(mapping.items())
        return pd.DataFrame(rows, columns=self.COLUMNS, dtype="object")

    def write(self, mapping: dict[str, str], stream: Optional[TextIO] = None) -> None:
        if self.path is None:
            out = stream if stream is not None else sys.stdout
            out.write(self.to_json(mapping) + "\n")
            out.flush()
            return

        if self.ext == ".json":
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(self.to_json(mapping) + "\n")
        elif self.ext == ".csv":
            self.to_frame(mapping).to_csv(self.path, index=False)
        elif self.ext == ".parquet":
            self.to_frame(mapping).to_parquet(self.path, index=False)

    def _ensure_parquet_engine(self):
        try:
            import pyarrow  # noqa: F401
        except ImportError:
            raise RuntimeError(
                "Parquet output requires pyarrow. Install via: pip install pyarrow"
            ) from None
