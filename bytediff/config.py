import os
from dataclasses import dataclass
from typing import Optional

from bytediff.repositories.base import SideStore
from bytediff.repositories.memory_store import MemorySideStore
from bytediff.repositories.object_store import HttpObjectSideStore
from bytediff.repositories.redis_store import RedisSideStore

STORE_BACKENDS = ("memory", "redis", "http")


@dataclass
class Settings:
    store: str = "memory"
    redis_url: str = "redis://localhost:6379/0"
    object_store_url: Optional[str] = None
    object_store_token: Optional[str] = None
    store_timeout: float = 10.0


def load_settings() -> Settings:
    """Read settings from the environment; unset variables keep their defaults."""
    return Settings(
        store=os.environ.get("DIFF_STORE", "memory").strip().lower(),
        redis_url=os.environ.get("REDIS_URL", "redis://localhost:6379/0"),
        object_store_url=os.environ.get("OBJECT_STORE_URL"),
        object_store_token=os.environ.get("OBJECT_STORE_TOKEN"),
        store_timeout=float(os.environ.get("STORE_TIMEOUT", "10")),
    )


def build_store(settings: Settings) -> SideStore:
    if settings.store == "memory":
        return MemorySideStore()
    if settings.store == "redis":
        return RedisSideStore.from_url(settings.redis_url, timeout=settings.store_timeout)
    if settings.store == "http":
        if not settings.object_store_url:
            raise ValueError("OBJECT_STORE_URL environment variable required for the http store.")
        return HttpObjectSideStore(
            settings.object_store_url,
            token=settings.object_store_token,
            timeout=settings.store_timeout,
        )
    raise ValueError(f"unknown DIFF_STORE {settings.store!r}, expected one of {', '.join(STORE_BACKENDS)}")
