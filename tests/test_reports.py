import io
import pytest

from objcontainer import Container, reports


def test_default_handler_outside_of_block(monkeypatch):
    stream = io.StringIO()
    monkeypatch.setattr(reports, "default_handler", reports.BareHandler(stream))

    Container({"A": 1, "a": 2}, lowercase_keys=True)

    output = stream.getvalue()
    assert output.startswith("objcontainer: Warning: ")
    assert output.rstrip().endswith("[-Wkey-collision]")


def test_bare_handler_joins_lines():
    stream = io.StringIO()
    reports.BareHandler(stream)(reports.warning, "test", "first\nsecond")
    assert stream.getvalue() == "objcontainer: Warning: first second [-Wtest]\n"


def test_exception_inside_block_propagates():
    with pytest.raises(KeyError):
        with reports.handle_reports(lambda *args: None):
            reports.warning("fine", "Nothing to see")
            raise KeyError("x")
    assert not reports.handle_reports.handlers_stack


def test_nested_handlers():
    outer, inner = [], []
    with reports.handle_reports(lambda priority, identifier, *messages: outer.append(identifier)):
        with reports.handle_reports(lambda priority, identifier, *messages: inner.append(identifier)):
            reports.warning("inner", "")
        reports.warning("outer", "")
    assert inner == ["inner"]
    assert outer == ["outer"]


def test_invalid_key_error():
    error = reports.InvalidKeyError(5)
    assert isinstance(error, TypeError)
    assert isinstance(error, reports.ContainerError)
    assert error.key == 5
    assert "int" in str(error)
