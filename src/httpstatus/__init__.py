"""
Registry of the HTTP status codes an HTTP/1.1 server emits or recognizes.

  >>> from httpstatus import Status, StatusLine, lookup
  >>> lookup(404).description
  '404 Not Found'
  >>> str(StatusLine(Status.OK))
  'HTTP/1.1 200 OK'
"""
try:
  from .Error import RegistryError, UnknownStatusError, ResponseError
  from .Category import Category
  from .Status import Status, STATUS_TABLE, PHRASE_OVERRIDES, derive_phrase, description
  from .Registry import StatusRegistry, REGISTRY, lookup
  from .StatusLine import StatusLine
except ImportError:
  from httpstatus.Error import RegistryError, UnknownStatusError, ResponseError
  from httpstatus.Category import Category
  from httpstatus.Status import Status, STATUS_TABLE, PHRASE_OVERRIDES, derive_phrase, description
  from httpstatus.Registry import StatusRegistry, REGISTRY, lookup
  from httpstatus.StatusLine import StatusLine

__all__ = [
  "Category",
  "PHRASE_OVERRIDES",
  "REGISTRY",
  "RegistryError",
  "ResponseError",
  "STATUS_TABLE",
  "Status",
  "StatusLine",
  "StatusRegistry",
  "UnknownStatusError",
  "derive_phrase",
  "description",
  "lookup",
]
