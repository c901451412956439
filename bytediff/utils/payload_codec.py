import base64
import binascii


def decode_value(value: str) -> bytes:
    """
    Decode standard (padded) base64 text into raw side bytes.
    Line breaks are ignored so wrapped output (e.g. 76-column `base64`)
    decodes; any other character outside the base64 alphabet is rejected.
    Raises ValueError on malformed input.
    """
    try:
        return base64.b64decode(value.replace("\r", "").replace("\n", ""), validate=True)
    except (binascii.Error, ValueError, TypeError, AttributeError) as e:
        raise ValueError(f"not base64: {e}") from e


def encode_value(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
