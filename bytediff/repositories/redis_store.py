from typing import Dict, Optional

import redis

from bytediff.repositories.base import SideStore, StoreError, check_key_parts


def key_of(identifier: str) -> str:
    return f"diff:{identifier}"


class RedisSideStore(SideStore):
    """
    One Redis hash per identifier (`diff:<id>`), one field per side.
    HGETALL brings back both sides at once, so reads are not split.
    """

    def __init__(self, client: redis.Redis):
        self.client = client

    @classmethod
    def from_url(cls, url: str, timeout: Optional[float] = None) -> "RedisSideStore":
        return cls(redis.Redis.from_url(url, socket_timeout=timeout))

    def save_side(self, identifier: str, side: str, data: bytes) -> None:
        check_key_parts(identifier, side)
        try:
            self.client.hset(key_of(identifier), side, bytes(data))
        except redis.RedisError as e:
            raise StoreError(f"redis HSET failed for {identifier}/{side}: {e}") from e

    def get_sides_by_identifier(self, identifier: str) -> Dict[str, bytes]:
        try:
            fields = self.client.hgetall(key_of(identifier))
        except redis.RedisError as e:
            raise StoreError(f"redis HGETALL failed for {identifier}: {e}") from e
        return {
            (k.decode("utf-8") if isinstance(k, bytes) else k): bytes(v)
            for k, v in fields.items()
        }
