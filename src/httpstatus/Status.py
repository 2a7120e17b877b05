try:
  from .Category import Category
except ImportError:
  from httpstatus.Category import Category

SEPARATOR = "_"

def derive_phrase(identifier: str, code: int) -> str:
  """
  Builds the reason phrase from the identifier: NOT_FOUND, 404 -> "404 Not Found".
  """
  words = [word.capitalize() for word in identifier.split(SEPARATOR) if word]
  return f"{code} {' '.join(words)}"

def description(entry: "Status") -> str:
  """Returns the override phrase if set, else the derived one."""
  if entry.phrase_override is not None:
    return entry.phrase_override
  return derive_phrase(entry.identifier, entry.code)

class Status:
  def __init__(self, code: int, identifier: str, phrase_override: str | None = None):
    self._code = code
    self._identifier = identifier
    self._phrase_override = phrase_override
  @property
  def code(self) -> int:
    return self._code
  @property
  def identifier(self) -> str:
    return self._identifier
  @property
  def name(self) -> str:
    return self._identifier
  @property
  def phrase_override(self) -> str | None:
    return self._phrase_override
  @property
  def description(self) -> str:
    return description(self)
  @property
  def reason(self) -> str:
    """The description without its leading code, e.g. "Not Found"."""
    return self.description.split(" ", 1)[1]
  @property
  def category(self) -> Category:
    return Category.query(self._code)
  @property
  def is_redirect(self) -> bool:
    return self.category == Category.REDIRECTION
  @property
  def is_error(self) -> bool:
    return self.category in (Category.CLIENT_ERROR, Category.SERVER_ERROR)
  def __str__(self) -> str:
    return self.description
  def __repr__(self) -> str:
    return f"Status({self._code}, {self._identifier})"
  def __eq__(self, other: "Status") -> bool: # type: ignore
    if not isinstance(other, Status):
      return NotImplemented
    return (self._code, self._identifier, self._phrase_override) == (other._code, other._identifier, other._phrase_override)
  def __hash__(self) -> int:
    return hash((self._code, self._identifier, self._phrase_override))
  # Set by Registry once the table is built
  _registry: "StatusRegistry" # type: ignore # noqa: F821
  @classmethod
  def lookup(cls, code: int) -> "Status":
    return cls._registry.lookup(code)
  @classmethod
  def query(cls, code: int) -> "Status":
    return cls._registry.lookup(code)
  # 1xx Informational
  SWITCH_PROTOCOL         : "Status"
  # 2xx Success
  OK                      : "Status"
  CREATED                 : "Status"
  ACCEPTED                : "Status"
  NO_CONTENT              : "Status"
  PARTIAL_CONTENT         : "Status"
  MULTI_STATUS            : "Status"
  # 3xx Redirection
  REDIRECT                : "Status"
  FOUND                   : "Status"
  REDIRECT_SEE_OTHER      : "Status"
  NOT_MODIFIED            : "Status"
  TEMPORARY_REDIRECT      : "Status"
  # 4xx Client Error
  BAD_REQUEST             : "Status"
  UNAUTHORIZED            : "Status"
  FORBIDDEN               : "Status"
  NOT_FOUND               : "Status"
  METHOD_NOT_ALLOWED      : "Status"
  NOT_ACCEPTABLE          : "Status"
  REQUEST_TIMEOUT         : "Status"
  CONFLICT                : "Status"
  GONE                    : "Status"
  LENGTH_REQUIRED         : "Status"
  PRECONDITION_FAILED     : "Status"
  PAYLOAD_TOO_LARGE       : "Status"
  UNSUPPORTED_MEDIA_TYPE  : "Status"
  RANGE_NOT_SATISFIABLE   : "Status"
  EXPECTATION_FAILED      : "Status"
  TOO_MANY_REQUESTS       : "Status"
  # 5xx Server Error
  INTERNAL_ERROR          : "Status"
  NOT_IMPLEMENTED         : "Status"
  SERVICE_UNAVAILABLE     : "Status"
  UNSUPPORTED_HTTP_VERSION: "Status"

STATUS_TABLE: tuple[tuple[str, int], ...] = (
  # 1xx Informational
  ("SWITCH_PROTOCOL",          101),
  # 2xx Success
  ("OK",                       200),
  ("CREATED",                  201),
  ("ACCEPTED",                 202),
  ("NO_CONTENT",               204),
  ("PARTIAL_CONTENT",          206),
  ("MULTI_STATUS",             207),
  # 3xx Redirection
  ("REDIRECT",                 301),
  ("FOUND",                    302),
  ("REDIRECT_SEE_OTHER",       303),
  ("NOT_MODIFIED",             304),
  ("TEMPORARY_REDIRECT",       307),
  # 4xx Client Error
  ("BAD_REQUEST",              400),
  ("UNAUTHORIZED",             401),
  ("FORBIDDEN",                403),
  ("NOT_FOUND",                404),
  ("METHOD_NOT_ALLOWED",       405),
  ("NOT_ACCEPTABLE",           406),
  ("REQUEST_TIMEOUT",          408),
  ("CONFLICT",                 409),
  ("GONE",                     410),
  ("LENGTH_REQUIRED",          411),
  ("PRECONDITION_FAILED",      412),
  ("PAYLOAD_TOO_LARGE",        413),
  ("UNSUPPORTED_MEDIA_TYPE",   415),
  ("RANGE_NOT_SATISFIABLE",    416),
  ("EXPECTATION_FAILED",       417),
  ("TOO_MANY_REQUESTS",        429),
  # 5xx Server Error
  ("INTERNAL_ERROR",           500),
  ("NOT_IMPLEMENTED",          501),
  ("SERVICE_UNAVAILABLE",      503),
  ("UNSUPPORTED_HTTP_VERSION", 505),
)

# Identifiers whose standard reason phrase does not follow from the name
PHRASE_OVERRIDES: dict[str, str] = {
  "SWITCH_PROTOCOL"         : "101 Switching Protocols",
  "OK"                      : "200 OK",
  "MULTI_STATUS"            : "207 Multi-Status",
  "REDIRECT"                : "301 Moved Permanently",
  "REDIRECT_SEE_OTHER"      : "303 See Other",
  "RANGE_NOT_SATISFIABLE"   : "416 Requested Range Not Satisfiable",
  "INTERNAL_ERROR"          : "500 Internal Server Error",
  "UNSUPPORTED_HTTP_VERSION": "505 HTTP Version Not Supported",
}
