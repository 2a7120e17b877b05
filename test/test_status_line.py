import pytest

from httpstatus import ResponseError, Status, StatusLine, UnknownStatusError


def test_render():
  assert str(StatusLine(Status.OK)) == "HTTP/1.1 200 OK"
  assert str(StatusLine(Status.NOT_FOUND, "1.0")) == "HTTP/1.0 404 Not Found"
  assert StatusLine(Status.INTERNAL_ERROR).pack() == b"HTTP/1.1 500 Internal Server Error"


def test_unpack():
  line = StatusLine.unpack(b"HTTP/1.1 303 See Other\r\n")
  assert line.status is Status.REDIRECT_SEE_OTHER
  assert line.version == "1.1"
  assert line.protocol == "HTTP/1.1"


def test_unpack_ignores_wire_phrase():
  line = StatusLine.unpack("HTTP/1.0 416 Range Not Satisfiable")
  assert line.status is Status.RANGE_NOT_SATISFIABLE
  assert str(line) == "HTTP/1.0 416 Requested Range Not Satisfiable"


def test_unpack_without_phrase():
  assert StatusLine.unpack(b"HTTP/1.1 204").status is Status.NO_CONTENT


@pytest.mark.parametrize("data", [
  b"",
  b"\r\n",
  b"HTTP/1.1",
  b"HTTP/1.1 abc Nope",
  b"HTTP/1.1 4040 Not Found",
  b"HTTX/1.1 200 OK",
  b"HTTP/ 200 OK",
  b"HTTP/1.1 \xff\xfe OK",
])
def test_unpack_malformed(data):
  with pytest.raises(ValueError):
    StatusLine.unpack(data)


def test_unpack_unknown_code():
  with pytest.raises(UnknownStatusError):
    StatusLine.unpack(b"HTTP/1.1 999 Whatever")


def test_response_error():
  error = ResponseError(Status.FORBIDDEN, "Directory listing disabled")
  assert str(error) == "Directory listing disabled"
  assert error.status is Status.FORBIDDEN
  assert str(error.status_line()) == "HTTP/1.1 403 Forbidden"
  assert str(error.status_line("1.0")) == "HTTP/1.0 403 Forbidden"
  assert repr(error) == "ResponseError(Status(403, FORBIDDEN), 'Directory listing disabled')"


def test_response_error_is_raisable():
  with pytest.raises(ResponseError) as info:
    raise ResponseError(Status.BAD_REQUEST, "Missing Content-Length")
  assert info.value.status.code == 400


def test_response_error_annotations():
  assert ResponseError.__init__.__annotations__["status"] == "Status"
  assert ResponseError.status_line.__annotations__["return"] == "StatusLine"
