# Copyright 2026 The gRPC Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Bounded producer/consumer plumbing for server-streaming handlers."""

import asyncio
from typing import AsyncIterator, Iterable, TypeVar

T = TypeVar("T")

_EOF = object()


async def bounded(items: Iterable[T], maxsize: int) -> AsyncIterator[T]:
    """Streams items through a queue holding at most maxsize of them.

    A producer task pulls from items and suspends while the queue is full, so
    it never runs more than maxsize items ahead of the consumer. If the
    consumer goes away early, e.g. because the RPC was cancelled, the
    producer is cancelled with it. An exception raised by items reaches the
    consumer after every item produced before it.
    """
    if maxsize <= 0:
        raise ValueError("maxsize must be positive, got {}".format(maxsize))
    queue = asyncio.Queue(maxsize=maxsize)

    async def produce() -> None:
        try:
            for item in items:
                await queue.put(item)
        except Exception:
            await queue.put(_EOF)
            raise
        await queue.put(_EOF)

    producer = asyncio.ensure_future(produce())
    try:
        while True:
            item = await queue.get()
            if item is _EOF:
                break
            yield item
        # Re-raises whatever stopped the producer.
        await producer
    finally:
        producer.cancel()
        if producer.done() and not producer.cancelled():
            # The consumer left before seeing the error; retrieve it anyway.
            producer.exception()
