import os

import pandas as pd
import pytest

from smsfilter.data import (
    as_dataset, load_cached, load_raw, parse_line, read_cache, save_cache,
)
from smsfilter.errors import DatasetError


def test_parse_line_splits_at_first_whitespace_run():
    assert parse_line("spam \t  free   entry now\n") == ("spam", "free   entry now")
    assert parse_line("ham\tok lah\r\n") == ("ham", "ok lah")


@pytest.mark.parametrize("line", ["", "spam", "spam   \n", "  ham text", "SPAM hi", "junk text"])
def test_parse_line_rejects_invalid_rows(line):
    assert parse_line(line) is None


def test_load_raw_keeps_valid_records_only(train_file, caplog):
    caplog.set_level("INFO")
    df = load_raw(train_file)
    assert list(df.columns) == ["label", "text"]
    assert len(df) == 6
    assert (df["label"].astype(str) != "").all()
    assert (df["text"] != "").all()
    assert list(df["label"].cat.categories) == ["spam", "ham"]
    assert df["text"].iloc[0] == "WIN money now"
    assert "Invalid row" in caplog.text


def test_load_raw_missing_file(tmp_path):
    with pytest.raises(DatasetError):
        load_raw(tmp_path / "nope.txt")


def test_as_dataset_drops_empty_fields():
    df = as_dataset([("spam", ""), ("", "hello"), ("ham", "hi"), ("spam", None)])
    assert df.to_dict("records") == [{"label": "ham", "text": "hi"}]


def test_cache_roundtrip(tmp_path, train_file):
    df = load_raw(train_file)
    save_cache(df, tmp_path / "c" / "train.parquet")
    back = read_cache(tmp_path / "c" / "train.parquet")
    pd.testing.assert_frame_equal(back, df)


def test_load_cached_creates_then_reuses_cache(tmp_path, train_file):
    cache = tmp_path / "train.parquet"
    first = load_cached(train_file, cache)
    assert cache.exists()

    # a fresh cache wins over the raw file
    os.utime(cache, (train_file.stat().st_mtime + 10,) * 2)
    train_file.write_text("ham\tonly one line\n", encoding="utf-8")
    os.utime(train_file, (cache.stat().st_mtime - 5,) * 2)
    again = load_cached(train_file, cache)
    pd.testing.assert_frame_equal(again, first)


def test_load_cached_rebuilds_stale_cache(tmp_path, train_file):
    cache = tmp_path / "train.parquet"
    load_cached(train_file, cache)
    train_file.write_text("ham\tonly one line\n", encoding="utf-8")
    os.utime(train_file, (cache.stat().st_mtime + 10,) * 2)
    df = load_cached(train_file, cache)
    assert df.to_dict("records") == [{"label": "ham", "text": "only one line"}]


def test_load_cached_rebuilds_corrupt_cache(tmp_path, train_file):
    cache = tmp_path / "train.parquet"
    cache.write_bytes(b"not parquet")
    os.utime(cache, (train_file.stat().st_mtime + 10,) * 2)
    df = load_cached(train_file, cache)
    assert len(df) == 6
    assert len(read_cache(cache)) == 6
