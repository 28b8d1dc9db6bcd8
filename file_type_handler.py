import logging
import os

import pandas as pd


logger = logging.getLogger(__name__)


class DataSourceError(Exception):
    """Raised when a table cannot be loaded from its backing file."""


class FileTypeHandler:
    DELIMITERS = {".csv": ",", ".tsv": "\t", ".tab": "\t"}
    SUPPORTED = (".csv", ".tsv", ".tab", ".parquet", ".xlsx")

    def __init__(self, path: str, header: bool = True):
        self.path = path
        self.header = header
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext not in self.SUPPORTED:
            raise DataSourceError(
                f"Unsupported file type '{self.ext or path}' "
                f"(use {', '.join(self.SUPPORTED)})"
            )

    def load(self) -> pd.DataFrame:
        if not os.path.exists(self.path):
            raise DataSourceError(f"No such file: {self.path}")
        if os.path.isdir(self.path):
            raise DataSourceError(f"Not a file: {self.path}")

        logger.info("loading %s as %s", self.path, self.ext)
        if self.ext in self.DELIMITERS:
            return self._load_delimited()
        if self.ext == ".parquet":
            return self._load_parquet()
        return self._load_excel()

    def _load_delimited(self) -> pd.DataFrame:
        try:
            df = pd.read_csv(
                self.path,
                sep=self.DELIMITERS[self.ext],
                dtype=str,
                keep_default_na=False,
                header=0 if self.header else None,
            )
        except pd.errors.EmptyDataError:
            return pd.DataFrame()
        except (pd.errors.ParserError, UnicodeDecodeError, OSError) as exc:
            raise DataSourceError(f"Cannot read {self.path}: {exc}") from exc
        return df

    def _load_parquet(self) -> pd.DataFrame:
        self._ensure_parquet_engine()
        try:
            df = pd.read_parquet(self.path)
        except Exception as exc:
            raise DataSourceError(f"Cannot read {self.path}: {exc}") from exc
        return self._promote_header(df)

    def _load_excel(self) -> pd.DataFrame:
        self._ensure_excel_engine()
        try:
            df = pd.read_excel(
                self.path,
                sheet_name=0,
                dtype=str,
                keep_default_na=False,
                header=0 if self.header else None,
            )
        except Exception as exc:
            raise DataSourceError(f"Cannot read {self.path}: {exc}") from exc
        return df

    def _promote_header(self, df: pd.DataFrame) -> pd.DataFrame:
        # parquet always carries column names; keep them as data when asked
        if self.header:
            return df
        names = pd.DataFrame([list(df.columns)], columns=df.columns)
        return pd.concat([names, df.astype(object)], ignore_index=True)

    def _ensure_parquet_engine(self):
        try:
            import pyarrow  # noqa: F401

            return
        except ImportError:
            pass
        raise DataSourceError(
            "Parquet support requires pyarrow. Install via: pip install pyarrow"
        )

    def _ensure_excel_engine(self):
        try:
            import openpyxl  # noqa: F401

            return
        except ImportError:
            pass
        raise DataSourceError(
            "XLSX support requires openpyxl. Install via: pip install openpyxl"
        )
