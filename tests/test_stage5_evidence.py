import pytest
from nullable import Nullable, NullabilityViolation, maybe_null, not_null
from nullable import syntax as nl
from nullable.core.evidence import Nullability, declared, require_not_null, require_nullable

@not_null
def length(s):
    return len(s)

@maybe_null(reason="lookup may miss")
def lookup(key):
    return {"a": 1}.get(key)

@maybe_null
def lookup_nullable(key):
    return Nullable.of({"a": 1}.get(key))

def test_decorators_attach_evidence():
    assert declared(length).nullability is Nullability.NOT_NULL
    assert declared(lookup).nullability is Nullability.NULLABLE
    assert declared(lookup).reason == "lookup may miss"
    assert declared(lambda x: x) is None

def test_decorated_functions_still_work():
    assert Nullable.of("foo").map(length) == Nullable.of(3)
    assert Nullable.of("a").flat_map(lookup_nullable) == Nullable.of(1)
    assert nl.flat_map("b", lookup) is None

def test_map_rejects_declared_nullable_before_calling():
    with pytest.raises(NullabilityViolation, match="declared nullable"):
        Nullable.of("a").map(lookup)
    # rejected even on the absent path
    with pytest.raises(NullabilityViolation):
        nl.map(None, lookup)

def test_flat_map_rejects_declared_not_null():
    with pytest.raises(NullabilityViolation, match="declared not null"):
        Nullable.of("foo").flat_map(length)
    with pytest.raises(NullabilityViolation):
        nl.flat_map("foo", length)

def test_require_not_null():
    assert require_not_null(0) == 0
    with pytest.raises(NullabilityViolation):
        require_not_null(None)
    with pytest.raises(NullabilityViolation):
        require_not_null(Nullable.empty())

def test_require_nullable():
    n = Nullable.of(1)
    assert require_nullable(n) is n
    with pytest.raises(NullabilityViolation, match="Use .map instead"):
        require_nullable(1)
