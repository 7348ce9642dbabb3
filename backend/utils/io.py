"""Read listing seed files from the data directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from .logging import get_logger

LOGGER = get_logger("utils.io")

DATA_DIR = Path(os.getenv("DATA_DIR", Path(__file__).resolve().parents[2] / "data"))


def resolve_path(name: Union[str, Path]) -> Path:
    path = Path(name)
    return path if path.is_absolute() else DATA_DIR / path


def load_csv(name: Union[str, Path], required: Iterable[str] = ()) -> pd.DataFrame:
    """Load a CSV as strings so blank cells stay ``""`` rather than NaN.

    Raises ``ValueError`` when any of the ``required`` columns is absent.
    """

    path = resolve_path(name)
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {path}")
    LOGGER.debug("loading_csv path=%s", path)
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = [column for column in required if column not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is missing columns: {', '.join(missing)}")
    return df
