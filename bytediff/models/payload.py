from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


def parse_side(token: str) -> Side:
    """
    Exact, case-sensitive match on the wire tokens `left` / `right`.
    Raises ValueError for anything else.
    """
    for side in Side:
        if token == side.value:
            return side
    raise ValueError(f"invalid side value: {token!r}")


@dataclass(frozen=True)
class DiffPayload:
    identifier: str
    side: Side
    value: str  # base64 text


class PayloadRequestBody(BaseModel):
    data: Optional[str] = None


class ErrorResponseBody(BaseModel):
    id: str
    reason: str
    cause: str = ""
