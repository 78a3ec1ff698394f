import asyncio
import logging
from typing import Awaitable, Callable, Sequence, TypeVar

log = logging.getLogger("services.batch")

T = TypeVar("T")
R = TypeVar("R")

async def fetch_in_batches(
    items: Sequence[T],
    fetch: Callable[[T], Awaitable[R]],
    *,
    batch_size: int,
    delay_ms: int,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> list[R]:
    """
    Fixed-window fan-out:
      - run `fetch` for up to batch_size items at once
      - wait for the whole batch
      - pause delay_ms before the next batch (never after the last one)

    Results come back in input order. The first failure in a batch propagates
    and cancels the batch's other fetches; there is no retry and no partial
    result.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")
    if delay_ms < 0:
        raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")

    results: list[R] = []
    total = len(items)

    for start in range(0, total, batch_size):
        batch = items[start : start + batch_size]
        log.debug("Batch %d-%d of %d", start + 1, start + len(batch), total)
        results.extend(await _gather_or_cancel([fetch(item) for item in batch]))

        if start + batch_size < total:
            await sleep(delay_ms / 1000)

    return results

async def _gather_or_cancel(coros: list[Awaitable[R]]) -> list[R]:
    tasks = [asyncio.ensure_future(c) for c in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
