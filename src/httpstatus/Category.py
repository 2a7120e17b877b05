try:
  from .Error import UnknownStatusError
except ImportError:
  from httpstatus.Error import UnknownStatusError

class Category:
  """Status class, given by the leading digit of a status code."""
  def __init__(self, digit: int, name: str):
    self.digit = digit
    self.name = name
  def __str__(self) -> str:
    return f"{self.digit}xx {self.name}"
  def __repr__(self) -> str:
    return f"Category({self.digit}, {self.name})"
  def __eq__(self, other: "Category") -> bool: # type: ignore
    if not isinstance(other, Category):
      return NotImplemented
    return self.digit == other.digit
  def __hash__(self) -> int:
    return hash(self.digit)
  def contains(self, code: int) -> bool:
    return 100 <= code <= 599 and code // 100 == self.digit
  _map: dict[int, "Category"]
  @classmethod
  def query(cls, code: int) -> "Category":
    """
    Returns the category of any code in 100-599, registered or not.
    """
    if 100 <= code <= 599:
      return cls._map[code // 100]
    raise UnknownStatusError(code, f"Status code out of range: {code}")
  INFORMATIONAL: "Category"
  SUCCESS      : "Category"
  REDIRECTION  : "Category"
  CLIENT_ERROR : "Category"
  SERVER_ERROR : "Category"

Category.INFORMATIONAL = Category(1, "Informational")
Category.SUCCESS       = Category(2, "Success")
Category.REDIRECTION   = Category(3, "Redirection")
Category.CLIENT_ERROR  = Category(4, "Client Error")
Category.SERVER_ERROR  = Category(5, "Server Error")

Category._map = {category.digit: category for category in Category.__dict__.values() if isinstance(category, Category)}
