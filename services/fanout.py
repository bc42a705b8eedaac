import asyncio
import logging
from typing import List, Optional, Sequence

from models import Chunk, MatchResult
from services.vector_client import SimilarityLookupError

logger = logging.getLogger(__name__)

DEFAULT_BATCH_TIMEOUT = 30.0


async def _lookup(client, chunk: Chunk) -> Optional[MatchResult]:
    matches = await client.query(data=chunk.text, top_k=1, include_metadata=True)
    return matches[0] if matches else None


async def _cancel_all(tasks: Sequence[asyncio.Task]):
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)


async def query_chunks(client, chunks: Sequence[Chunk],
                       timeout: Optional[float] = DEFAULT_BATCH_TIMEOUT) -> List[Optional[MatchResult]]:
    """
    Look up the nearest neighbour of every chunk concurrently

    Args:
        client: Object exposing an async `query(data, top_k, include_metadata)`
        chunks: Chunks to look up, word and semantic alike
        timeout: Seconds allowed for the whole batch, None for no limit

    Returns:
        One slot per chunk in input order, None where the index had no match

    Raises:
        The first lookup failure, or SimilarityLookupError when the batch times out.
        Outstanding lookups are cancelled either way.
    """
    if not chunks:
        return []

    tasks = [asyncio.create_task(_lookup(client, chunk)) for chunk in chunks]
    try:
        done, pending = await asyncio.wait(tasks, timeout=timeout, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        await _cancel_all(tasks)
        raise

    failed = next((task for task in tasks if task in done and not task.cancelled() and task.exception()), None)
    if failed is not None:
        # gather also retrieves the exceptions of any other finished lookups
        await _cancel_all(tasks)
        raise failed.exception()

    if pending:
        await _cancel_all(pending)
        logger.error(f"{len(pending)} of {len(tasks)} lookups did not finish within {timeout}s")
        raise SimilarityLookupError(f"Similarity lookups timed out after {timeout}s")

    logger.debug(f"Completed {len(tasks)} similarity lookups")
    return [task.result() for task in tasks]
