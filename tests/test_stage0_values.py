import pytest
from nullable.core.values import is_absent, is_present
from nullable.core.errors import EmptyValueAccess, NullabilityViolation, NullableError

@pytest.mark.parametrize("val", [0, "", False, [], "foo", 42])
def test_falsy_values_are_present(val):
    assert is_present(val)
    assert not is_absent(val)

def test_none_is_absent():
    assert is_absent(None)
    assert not is_present(None)

def test_error_hierarchy():
    err = EmptyValueAccess("get")
    assert isinstance(err, NullableError)
    assert isinstance(err, LookupError)
    assert err.operation == "get"
    assert "absent" in str(err)

    violation = NullabilityViolation("map", "Use .flat_map instead")
    assert isinstance(violation, NullableError)
    assert isinstance(violation, TypeError)
    assert str(violation) == "map: Use .flat_map instead"
