"""HTTP header field parsing and default response headers."""

from __future__ import annotations

CONTENT_LENGTH = "content-length"
CONNECTION = "connection"
CONTENT_TYPE = "content-type"

_CRLF = b"\r\n"
_ALLOWED_NAME_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz!#$%&'*+-.^_`|~")


class HeaderError(ValueError):
    """Raised when a header line cannot be parsed."""


class Headers(dict):
    """Header fields keyed by their lower-case names."""

    def parse(self, data: bytes) -> tuple[int, bool]:
        """Parse at most one header line from ``data``.

        Returns the number of bytes consumed and whether the blank line
        ending the header section was reached. Nothing is consumed when
        ``data`` holds no complete line yet.
        """
        data = bytes(data)
        idx = data.find(_CRLF)
        if idx < 0:
            return 0, False
        if idx == 0:
            return len(_CRLF), True
        self._parse_line(data[:idx].decode("utf-8", errors="replace"))
        return idx + len(_CRLF), False

    def _parse_line(self, line: str) -> None:
        idx = line.find(":")
        if idx < 1 or line[idx - 1] == " ":
            raise HeaderError("Malformed header")

        key = line[:idx].lower().strip()
        if any(ch not in _ALLOWED_NAME_CHARS for ch in key):
            raise HeaderError("Field name contains invalid characters")

        value = line[idx + 1:].strip()
        if not value:
            raise HeaderError("Header does not contain a valid value")

        if key in self:
            value = f"{self[key]}, {value}"
        self[key] = value

    def get(self, key: str, default: str = "") -> str:
        """Look up a header case-insensitively, returning ``default`` if absent."""
        return super().get(key.lower(), default)


def get_as_canonical(key: str) -> str:
    """Return ``key`` in canonical form, e.g. ``content-type`` -> ``Content-Type``.

    Segments that do not start with a letter are dropped.
    """
    parts = []
    for part in key.split("-"):
        part = part.lower()
        if not part:
            raise ValueError(f"empty segment in header name {key!r}")
        if "a" <= part[0] <= "z":
            parts.append(part[0].upper() + part[1:])
    return "-".join(parts)


def get_default_headers(content_len: int) -> Headers:
    """Return the headers sent with every plain-text response."""
    headers = Headers()
    headers[get_as_canonical(CONTENT_LENGTH)] = str(content_len)
    headers[get_as_canonical(CONNECTION)] = "close"
    headers[get_as_canonical(CONTENT_TYPE)] = "text/plain"
    return headers