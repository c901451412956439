from typing import Optional

from bytediff.models.diff_report import DiffReport, DiffResult
from bytediff.models.errors import InvalidPayload, NotFound, StoreFailure
from bytediff.models.payload import DiffPayload, Side
from bytediff.repositories.base import SideStore
from bytediff.services.comparator import ByteComparator
from bytediff.services.pair_fetcher import ConcurrentPairFetcher
from bytediff.utils.payload_codec import decode_value


class DiffService:
    """
    Stores uploaded sides and builds diff reports out of them.

    Every call is independent: nothing is cached here, a report always
    reflects whatever the store holds at the time it is requested.
    Failures are raised as InvalidPayload, NotFound or StoreFailure.
    """

    def __init__(
        self,
        store: SideStore,
        comparator: Optional[ByteComparator] = None,
        fetcher: Optional[ConcurrentPairFetcher] = None,
    ):
        self.store = store
        self.comparator = comparator or ByteComparator()
        self.fetcher = fetcher or ConcurrentPairFetcher(store)

    def save(self, payload: DiffPayload) -> None:
        if not valid_identifier(payload.identifier):
            raise InvalidPayload("missing identifier")
        try:
            data = decode_value(payload.value)
        except ValueError:
            raise InvalidPayload("not base64") from None

        try:
            self.store.save_side(payload.identifier, payload.side.value, data)
        except Exception as e:
            raise StoreFailure("cannot save payload", e) from e

    def save_side(self, identifier: str, side: Side, value: str) -> None:
        self.save(DiffPayload(identifier=identifier, side=side, value=value))

    def get_report(self, identifier: str) -> DiffReport:
        if not valid_identifier(identifier):
            raise NotFound(identifier)

        try:
            sides = self.fetcher.fetch(identifier)
        except Exception as e:
            raise StoreFailure(f"cannot get resource {identifier} from storage", e) from e

        if Side.LEFT.value not in sides and Side.RIGHT.value not in sides:
            raise NotFound(identifier)

        # a side that was never uploaded compares as an empty buffer
        left = sides.get(Side.LEFT.value, b"")
        right = sides.get(Side.RIGHT.value, b"")
        if len(left) != len(right):
            return DiffReport(result=DiffResult.SIZE_MISMATCH)

        return self.comparator.compare(left, right)


def valid_identifier(identifier: Optional[str]) -> bool:
    return bool(identifier and identifier.strip())
