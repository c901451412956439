from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional


class StoreError(RuntimeError):
    """Raised by side stores when the backend cannot complete an operation."""


SIDE_TOKENS = ("left", "right")


class SideStore(ABC):
    """
    Persistence contract for uploaded sides: one raw blob per
    (identifier, side token), last write wins.
    """

    # True when the backend reads each side with its own round trip; the
    # pair fetcher then issues the two reads concurrently through get_side.
    reads_per_side = False

    @abstractmethod
    def save_side(self, identifier: str, side: str, data: bytes) -> None:
        ...

    @abstractmethod
    def get_sides_by_identifier(self, identifier: str) -> Dict[str, bytes]:
        """
        Sides stored for the identifier keyed by side token. Unknown
        identifiers give an empty dict; a missing key means that side was
        never uploaded (an uploaded empty buffer is present as b"").
        """

    def get_side(self, identifier: str, side: str) -> Optional[bytes]:
        return self.get_sides_by_identifier(identifier).get(side)


def collect_sides(get_side: Callable[[str, str], Optional[bytes]], identifier: str) -> Dict[str, bytes]:
    """
    Read both sides one after the other for stores that read per side.
    The first failing read propagates; absent sides are left out.
    """
    sides = {}
    for side in SIDE_TOKENS:
        data = get_side(identifier, side)
        if data is not None:
            sides[side] = data
    return sides


def check_key_parts(identifier: str, side: str) -> None:
    if not identifier:
        raise StoreError("cannot save diff side data without ID")
    if not side:
        raise StoreError("cannot save diff side data without side")
