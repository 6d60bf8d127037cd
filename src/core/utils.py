import base64
import binascii
import re

_DATA_URI_RE = re.compile(r"^data:(?P<media_type>[^;,]*);base64,(?P<payload>.*)$", re.DOTALL)


def to_data_uri(media_type: str | None, data: bytes | bytearray | list[int] | None) -> str:
    """
    Encode raw bytes as a base64 data URI, e.g. "data:image/png;base64,iVBOR...".
    A missing media type or payload produces an empty part, never an error.
    """
    payload = base64.b64encode(bytes(data or b"")).decode("ascii")
    return f"data:{media_type or ''};base64,{payload}"


def decode_data_uri(uri: str) -> tuple[str, bytes]:
    """
    Inverse of to_data_uri(). Returns (media_type, raw_bytes).
    Raises ValueError when the string is not a base64 data URI.
    """
    m = _DATA_URI_RE.match(uri or "")
    if not m:
        raise ValueError(f"Not a base64 data URI: {uri[:40]!r}")
    try:
        data = base64.b64decode(m.group("payload"), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e
    return m.group("media_type"), data
