from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Optional

from bytediff.models.payload import Side
from bytediff.repositories.base import SideStore


class ConcurrentPairFetcher:
    """
    Reads the left and right side of an identifier from a store.

    Stores that read one object per side (`reads_per_side`) get both reads
    submitted to their own worker thread. The call returns only after both
    reads have settled:
      - both succeed: the sides that exist, keyed by side token
      - any fails: the first failure to complete is raised, whatever the
        other read ends up doing; nothing partial is returned
    Stores that return the whole pair in one round trip are passed through.
    """

    def __init__(self, store: SideStore):
        self.store = store

    def fetch(self, identifier: str) -> Dict[str, bytes]:
        if not self.store.reads_per_side:
            return self.store.get_sides_by_identifier(identifier)

        sides: Dict[str, bytes] = {}
        error: Optional[BaseException] = None

        with ThreadPoolExecutor(max_workers=len(Side), thread_name_prefix="side-fetch") as pool:
            futures = {
                pool.submit(self.store.get_side, identifier, side.value): side
                for side in Side
            }
            for future in as_completed(futures):
                exc = future.exception()
                if exc is not None:
                    if error is None:
                        error = exc
                    continue
                data = future.result()
                if data is not None:
                    sides[futures[future].value] = data

        if error is not None:
            raise error
        return sides
