import argparse
import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

# Run from the repository root: python utilities/seed_index.py data/training_dataset.csv
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from services.corpus_loader import UPSERT_BATCH_SIZE, seed_index
from services.vector_client import VectorIndexClient

load_dotenv("config/.env")

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main(csv_path: str, batch_size: int) -> int:
    client = VectorIndexClient.from_env()
    try:
        return await seed_index(client, csv_path, batch_size=batch_size)
    finally:
        await client.aclose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Load reference phrases into the vector index")
    parser.add_argument("csv_path", help="CSV file with a 'text' column")
    parser.add_argument("--batch-size", type=int, default=UPSERT_BATCH_SIZE)
    args = parser.parse_args()

    total = asyncio.run(main(args.csv_path, args.batch_size))
    logger.info(f"Seeded {total} entries")
