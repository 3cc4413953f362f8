"""
Dataset loading for the raw two-column SMS format.

Raw files hold one record per line, ``<label><whitespace><text>``, where the
label is ``spam`` or ``ham``. Parsed datasets are pandas frames with a
categorical ``label`` column and a string ``text`` column; they can be cached
as Parquet next to the raw file so repeated runs skip the parsing.
"""

import logging
import re
from pathlib import Path

import pandas as pd

from .config import LABELS
from .errors import DatasetError

logger = logging.getLogger(__name__)

COLUMNS = ["label", "text"]
LABEL_DTYPE = pd.CategoricalDtype(categories=list(LABELS), ordered=False)

_SEP = re.compile(r"\s+")


def parse_line(line: str):
    """Split a raw line at the first whitespace run; None if it is not a record."""
    parts = _SEP.split(line.rstrip("\r\n"), maxsplit=1)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None
    if parts[0] not in LABELS:
        return None
    return parts[0], parts[1]


def as_dataset(rows) -> pd.DataFrame:
    """Coerce a frame or an iterable of (label, text) pairs into the dataset schema.

    Rows with a missing label, an unknown label or empty text are dropped.
    """
    if isinstance(rows, pd.DataFrame):
        df = rows.loc[:, COLUMNS].copy()
    else:
        df = pd.DataFrame(list(rows), columns=COLUMNS)

    label = df["label"].astype(object)
    text = df["text"].astype(object)
    nonempty = text.map(lambda t: isinstance(t, str) and t != "").astype(bool)
    keep = (label.isin(LABELS) & nonempty).to_numpy()
    df = pd.DataFrame({
        "label": label[keep].astype(str),
        "text": text[keep].astype(str),
    })
    df["label"] = df["label"].astype(LABEL_DTYPE)
    return df.reset_index(drop=True)


def load_raw(path) -> pd.DataFrame:
    path = Path(path)
    rows = []
    try:
        with path.open("r", encoding="utf-8", errors="ignore") as f:
            for lineno, line in enumerate(f, start=1):
                rec = parse_line(line)
                if rec is None:
                    logger.info("Invalid row %d in %s", lineno, path)
                    continue
                rows.append(rec)
    except OSError as e:
        raise DatasetError(f"Error loading raw dataset {path}: {e}") from e

    df = as_dataset(rows)
    logger.info("Loaded %d records from %s", len(df), path)
    return df


def save_cache(dataset: pd.DataFrame, path) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        as_dataset(dataset).to_parquet(path, index=False)
    except (OSError, ValueError) as e:
        raise DatasetError(f"Error saving dataset cache {path}: {e}") from e


def read_cache(path) -> pd.DataFrame:
    path = Path(path)
    try:
        df = pd.read_parquet(path)
        return as_dataset(df)
    except (OSError, ValueError, KeyError) as e:
        raise DatasetError(f"Error loading dataset cache {path}: {e}") from e


def _cache_is_fresh(raw_path: Path, cache_path: Path) -> bool:
    if not cache_path.exists():
        return False
    if not raw_path.exists():
        return True
    return cache_path.stat().st_mtime >= raw_path.stat().st_mtime


def load_cached(raw_path, cache_path) -> pd.DataFrame:
    """Read-through cache over ``load_raw``.

    The Parquet artifact at ``cache_path`` is used when it is at least as new
    as the raw file. Otherwise the raw file is parsed and the cache rewritten.
    """
    raw_path, cache_path = Path(raw_path), Path(cache_path)

    if _cache_is_fresh(raw_path, cache_path):
        try:
            df = read_cache(cache_path)
            logger.info("Loaded %d records from cache %s", len(df), cache_path)
            return df
        except DatasetError as e:
            logger.warning("%s; rebuilding from %s", e, raw_path)
    elif cache_path.exists():
        logger.info("Cache %s is older than %s; rebuilding", cache_path, raw_path)

    df = load_raw(raw_path)
    try:
        save_cache(df, cache_path)
    except DatasetError as e:
        logger.warning("%s", e)
    return df
