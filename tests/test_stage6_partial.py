import pytest
from nullable import Nullable, PartialFunction, partial_function

@partial_function(lambda s: len(s) > 3)
def shout(s):
    return s.upper()

def test_collect_defined():
    pf = PartialFunction(lambda s: s == "http", lambda s: "HTTP")
    assert Nullable.of("http").collect(pf) == Nullable.of("HTTP")

def test_collect_undefined():
    pf = PartialFunction(lambda s: s == "http", lambda s: "HTTP")
    assert Nullable.of("ftp").collect(pf) == Nullable.empty()

def test_collect_on_empty_never_calls():
    calls = []
    pf = PartialFunction(lambda x: calls.append(x) or True, lambda x: x)
    assert Nullable.empty().collect(pf) == Nullable.empty()
    assert calls == []

def test_collect_none_result_is_empty():
    pf = PartialFunction(lambda x: True, lambda x: None)
    assert Nullable.of(1).collect(pf) == Nullable.empty()

def test_decorator():
    assert isinstance(shout, PartialFunction)
    assert shout.is_defined_at("hello")
    assert not shout.is_defined_at("hi")
    assert shout("hello") == "HELLO"
    with pytest.raises(ValueError):
        shout("hi")
    assert Nullable.of("hello").collect(shout) == Nullable.of("HELLO")

def test_from_mapping_and_or_else():
    schemes = PartialFunction.from_mapping({"http": 80, "https": 443})
    fallback = PartialFunction(lambda s: s.startswith("ssh"), lambda s: 22)
    combined = schemes.or_else(fallback)

    assert combined("https") == 443
    assert combined("ssh+git") == 22
    assert not combined.is_defined_at("ftp")
    assert Nullable.of("http").collect(combined) == Nullable.of(80)
    assert Nullable.of("ftp").collect(combined) == Nullable.empty()

def test_lift():
    lifted = PartialFunction.from_mapping({"a": 1}).lift()
    assert lifted("a") == 1
    assert lifted("b") is None
