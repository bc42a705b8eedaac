"""Tests for loading the reference corpus into the index."""

import asyncio

import pytest

from services.corpus_loader import UPSERT_BATCH_SIZE, build_batches, read_corpus, seed_index


class RecordingIndex:
    def __init__(self):
        self.batches = []

    async def upsert(self, entries):
        self.batches.append(entries)


def _write_csv(tmp_path, rows, header="text"):
    path = tmp_path / "corpus.csv"
    lines = [header] + rows
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_read_corpus_skips_blank_rows(tmp_path):
    path = _write_csv(tmp_path, ["damn", "", "  ", '"what the heck"'])
    assert read_corpus(path) == ["damn", "what the heck"]


def test_read_corpus_requires_text_column(tmp_path):
    path = _write_csv(tmp_path, ["damn"], header="phrase")
    with pytest.raises(ValueError, match="text"):
        read_corpus(path)


def test_batches_have_sequential_ids_and_text_metadata():
    texts = [f"phrase {i}" for i in range(65)]
    batches = list(build_batches(texts))

    assert [len(batch) for batch in batches] == [30, 30, 5]
    entries = [entry for batch in batches for entry in batch]
    assert [entry["id"] for entry in entries] == [str(i) for i in range(65)]
    assert entries[42] == {"id": "42", "data": "phrase 42", "metadata": {"text": "phrase 42"}}


def test_invalid_batch_size():
    with pytest.raises(ValueError):
        list(build_batches(["a"], batch_size=0))


def test_seed_index_upserts_every_batch(tmp_path):
    path = _write_csv(tmp_path, [f"phrase {i}" for i in range(UPSERT_BATCH_SIZE + 1)])
    index = RecordingIndex()

    loaded = asyncio.run(seed_index(index, path))

    assert loaded == UPSERT_BATCH_SIZE + 1
    assert [len(batch) for batch in index.batches] == [UPSERT_BATCH_SIZE, 1]
