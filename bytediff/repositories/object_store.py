from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from bytediff.repositories.base import SideStore, StoreError, check_key_parts, collect_sides


def key_of(identifier: str, side: str) -> str:
    return f"diff/{quote(identifier, safe='')}/{side}"


class HttpObjectSideStore(SideStore):
    """
    S3-style object store reached over plain HTTP: each side is one object
    at `<base_url>/diff/<id>/<side>`, written with PUT and read with GET.
    A 404 on read means the side was never uploaded.

    Requests go through the module-level `requests.put` / `requests.get`,
    which open a fresh session per call, so concurrent reads from the pair
    fetcher and the server threadpool share no connection or cookie state.
    """

    reads_per_side = True

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        http: Any = requests,
    ):
        if not base_url:
            raise ValueError("object store base URL is required")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = http
        self.headers = {"Authorization": f"Bearer {token}"} if token else {}

    def _url(self, identifier: str, side: str) -> str:
        return f"{self.base_url}/{key_of(identifier, side)}"

    def save_side(self, identifier: str, side: str, data: bytes) -> None:
        check_key_parts(identifier, side)
        headers = {**self.headers, "Content-Type": "application/octet-stream"}
        try:
            resp = self.http.put(
                self._url(identifier, side), data=bytes(data), headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise StoreError(f"object PUT failed for {identifier}/{side}: {e}") from e
        with resp:
            _raise_for_status(resp, f"object PUT failed for {identifier}/{side}")

    def get_side(self, identifier: str, side: str) -> Optional[bytes]:
        try:
            resp = self.http.get(self._url(identifier, side), headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise StoreError(f"object GET failed for {identifier}/{side}: {e}") from e
        with resp:
            if resp.status_code == 404:
                return None
            _raise_for_status(resp, f"object GET failed for {identifier}/{side}")
            return resp.content

    def get_sides_by_identifier(self, identifier: str) -> Dict[str, bytes]:
        return collect_sides(self.get_side, identifier)


def _raise_for_status(resp: requests.Response, message: str) -> None:
    try:
        resp.raise_for_status()
    except requests.HTTPError as e:
        raise StoreError(f"{message}: {e}") from e
