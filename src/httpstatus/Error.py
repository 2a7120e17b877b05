from typing import TYPE_CHECKING

if TYPE_CHECKING:
  from .Status import Status
  from .StatusLine import StatusLine

class RegistryError(Exception):
  """Raised when the status table is inconsistent. Fatal at import time."""
  pass

class UnknownStatusError(ValueError):
  """
  Raised when a code (or identifier) is not registered.

  Subclasses ValueError so callers that already catch ValueError around
  Status.query keep working.
  """
  def __init__(self, code: object, message: str | None = None):
    self.code = code
    super().__init__(message or f"Unknown status code: {code!r}")

class ResponseError(Exception):
  """Aborts request handling with the given status."""
  def __init__(self, status: "Status", message: str = ""):
    super().__init__(message)
    self.status = status
    self.message = message

  def status_line(self, version: str | None = None) -> "StatusLine":
    try:
      from .StatusLine import StatusLine
    except ImportError:
      from httpstatus.StatusLine import StatusLine
    if version is None:
      return StatusLine(self.status)
    return StatusLine(self.status, version)

  def __repr__(self) -> str:
    return f"ResponseError({self.status!r}, {self.message!r})"
