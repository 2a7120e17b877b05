import logging
import re
from collections.abc import Iterable, Iterator, Mapping

try:
  from .Error import RegistryError, UnknownStatusError
  from .Status import Status, STATUS_TABLE, PHRASE_OVERRIDES
except ImportError:
  from httpstatus.Error import RegistryError, UnknownStatusError
  from httpstatus.Status import Status, STATUS_TABLE, PHRASE_OVERRIDES

# Range of codes the registry accepts
MIN_CODE = 100
MAX_CODE = 599

# Uppercase words joined by "_", e.g. NOT_FOUND
IDENTIFIER_PATTERN = re.compile(r"[A-Z0-9]+(_[A-Z0-9]+)*")

def _is_code(code: object) -> bool:
  # bool is an int subclass and floats hash like ints; neither is a status code
  return isinstance(code, int) and not isinstance(code, bool)

class StatusRegistry:
  """
  Immutable catalog of Status entries, indexed by code and by identifier.

  Built once from (identifier, code) pairs plus an override table for
  identifiers whose reason phrase cannot be derived from the name.
  Any inconsistency in the table raises RegistryError.
  """
  def __init__(self, table: Iterable[tuple[str, int]], overrides: Mapping[str, str] | None = None, logger: logging.Logger | None = None):
    self.logger = logger
    overrides = dict(overrides or {})
    by_code: dict[int, Status] = {}
    by_identifier: dict[str, Status] = {}

    for identifier, code in table:
      if not isinstance(identifier, str) or not IDENTIFIER_PATTERN.fullmatch(identifier):
        raise RegistryError(f"Malformed status identifier {identifier!r} for code {code!r}")
      if not _is_code(code):
        raise RegistryError(f"Status code for {identifier} must be an int, got {code!r}")
      if not MIN_CODE <= code <= MAX_CODE:
        raise RegistryError(f"Status code {code} ({identifier}) outside {MIN_CODE}-{MAX_CODE}")
      if code in by_code:
        raise RegistryError(f"Duplicate status code {code}: {by_code[code].identifier} and {identifier}")
      if identifier in by_identifier:
        raise RegistryError(f"Duplicate status identifier {identifier}: {by_identifier[identifier].code} and {code}")
      phrase = overrides.pop(identifier, None)
      if phrase is not None:
        prefix = f"{code} "
        if not isinstance(phrase, str) or not phrase.startswith(prefix) or not phrase[len(prefix):].strip():
          raise RegistryError(f"Phrase override for {identifier} must read \"{code} <reason>\", got {phrase!r}")
      status = Status(code, identifier, phrase)
      by_code[code] = status
      by_identifier[identifier] = status

    # Whatever is left names nothing in the table
    if overrides:
      raise RegistryError(f"Phrase overrides for unknown identifiers: {', '.join(sorted(map(str, overrides)))}")

    self._by_code = dict(sorted(by_code.items()))
    self._by_identifier = by_identifier
    if self.logger: self.logger.debug(f"Registered {len(self._by_code)} status codes")

  def lookup(self, code: int) -> Status:
    """
    Returns the entry registered for code.

    Raises UnknownStatusError when the code is not registered; no default
    entry is ever substituted.
    """
    if not _is_code(code) or code not in self._by_code:
      raise UnknownStatusError(code)
    return self._by_code[code]

  def get(self, identifier: str) -> Status:
    try:
      return self._by_identifier[identifier]
    except (KeyError, TypeError):
      raise UnknownStatusError(identifier, f"Unknown status identifier: {identifier}") from None

  def __contains__(self, code: object) -> bool:
    return _is_code(code) and code in self._by_code

  def __iter__(self) -> Iterator[Status]:
    return iter(self._by_code.values())

  def __len__(self) -> int:
    return len(self._by_code)

  def __repr__(self) -> str:
    return f"StatusRegistry({len(self)} entries)"

REGISTRY = StatusRegistry(STATUS_TABLE, PHRASE_OVERRIDES, logger=logging.getLogger(__name__))

def lookup(code: int) -> Status:
  return REGISTRY.lookup(code)

Status._registry = REGISTRY
for _status in REGISTRY:
  setattr(Status, _status.identifier, _status)
del _status
