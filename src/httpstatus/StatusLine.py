try:
  from .Status import Status
  from .Registry import lookup
except ImportError:
  from httpstatus.Status import Status
  from httpstatus.Registry import lookup

DEFAULT_VERSION = "1.1"

class StatusLine:
  def __init__(self, status: Status, version: str = DEFAULT_VERSION):
    """
    First line of an HTTP response.

    Args:
      status (Status): A registered status entry.
      version (str, optional): HTTP protocol version (e.g., "1.1"). Defaults to "1.1".
    """
    self.status = status
    self.version = version

  @property
  def protocol(self) -> str:
    return f"HTTP/{self.version}"

  def __str__(self) -> str:
    return f"{self.protocol} {self.status.description}"

  def __repr__(self) -> str:
    return f"StatusLine({self.status!r}, {self.version!r})"

  def __eq__(self, other: "StatusLine") -> bool: # type: ignore
    if not isinstance(other, StatusLine):
      return NotImplemented
    return self.status == other.status and self.version == other.version

  def pack(self) -> bytes:
    """
    Packs the line for transmission, without the trailing CRLF.
    """
    return str(self).encode("ascii")

  @classmethod
  def unpack(cls, data: bytes | str) -> "StatusLine":
    """
    Parses a status line such as b"HTTP/1.1 404 Not Found".

    The status is resolved from the numeric code; the reason phrase on the
    wire is ignored. Unregistered codes raise UnknownStatusError.
    """
    try:
      text = data.decode("ascii") if isinstance(data, bytes) else data
    except UnicodeDecodeError as e:
      raise ValueError(f"Failed to parse HTTP status line: {e}")

    text = text.rstrip("\r\n")
    if not text:
      raise ValueError("Empty status line")

    # Format: HTTP/1.1 200 OK (reason phrase may be empty)
    parts = text.split(" ", 2)
    if len(parts) < 2:
      raise ValueError(f"Malformed status line: {text!r}")

    protocol_str, code_str = parts[0], parts[1]
    if not protocol_str.startswith("HTTP/") or len(protocol_str) == len("HTTP/"):
      raise ValueError(f"Malformed protocol in status line: {protocol_str!r}")
    if len(code_str) != 3 or not (code_str.isascii() and code_str.isdigit()):
      raise ValueError(f"Malformed status code in status line: {code_str!r}")

    version = protocol_str.split("/", 1)[1]
    return cls(lookup(int(code_str)), version)
