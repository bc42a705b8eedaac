import csv
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Sequence, Union

logger = logging.getLogger(__name__)

UPSERT_BATCH_SIZE = 30


def read_corpus(path: Union[str, Path], column: str = "text") -> List[str]:
    """Read reference phrases from the `column` of a CSV file, skipping blank rows"""
    path = Path(path)
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or column not in reader.fieldnames:
            raise ValueError(f"CSV file {path} has no '{column}' column")
        texts = [row[column].strip() for row in reader if row.get(column) and row[column].strip()]

    logger.info(f"Read {len(texts)} reference phrases from {path.name}")
    return texts


def build_batches(texts: Sequence[str], batch_size: int = UPSERT_BATCH_SIZE) -> Iterator[List[Dict[str, Any]]]:
    """Group phrases into upsert batches with sequential ids and the text kept as metadata"""
    if batch_size <= 0:
        raise ValueError("batch_size must be positive")

    for start in range(0, len(texts), batch_size):
        yield [
            {"id": str(start + offset), "data": text, "metadata": {"text": text}}
            for offset, text in enumerate(texts[start:start + batch_size])
        ]


async def seed_index(client, path: Union[str, Path], batch_size: int = UPSERT_BATCH_SIZE) -> int:
    """
    Load a CSV corpus into the vector index

    Args:
        client: VectorIndexClient (or anything with an async `upsert(entries)`)
        path: CSV file with a `text` column
        batch_size: Entries per upsert request

    Returns:
        Number of entries upserted
    """
    texts = read_corpus(path)
    loaded = 0

    for batch_number, batch in enumerate(build_batches(texts, batch_size), 1):
        await client.upsert(batch)
        loaded += len(batch)
        logger.info(f"Upserted batch {batch_number} ({loaded}/{len(texts)} entries)")

    return loaded
