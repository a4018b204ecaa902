import pytest

from gqlcore.errors import (
    DefaultPanicHandler,
    Location,
    PanicHandler,
    QueryError,
    errorf,
)


def _is(err, target):
    while err is not None:
        if err is target:
            return True
        err = err.__cause__
    return False


def test_errorf_wraps_error():
    cause = EOFError("EOF")
    err = errorf("boom: %v", cause)
    assert _is(err, cause)
    assert err.err is cause
    assert err.message == "boom: EOF"


def test_plain_query_error_has_no_cause():
    cause = EOFError("EOF")
    err = QueryError("boom")
    assert not _is(err, cause)
    assert err.err is None


def test_errorf_no_arguments():
    cause = EOFError("EOF")
    err = errorf("boom")
    assert not _is(err, cause)
    assert err.message == "boom"


def test_errorf_non_error_argument():
    cause = EOFError("EOF")
    err = errorf("boom: %v", "shaka")
    assert not _is(err, cause)
    assert err.err is None
    assert err.message == "boom: shaka"


def test_errorf_quoted_verb():
    err = errorf("no operation with name %q", "Foo")
    assert err.message == 'no operation with name "Foo"'


def test_default_panic_handler():
    handler = DefaultPanicHandler()
    err = handler.make_panic_error(None, "foo")
    assert isinstance(err, QueryError)
    assert str(err) == "graphql: panic occurred: foo"
    assert err.message == "panic occurred: foo"


def test_panic_handler_is_abstract():
    with pytest.raises(TypeError):
        PanicHandler()


def test_error_string_with_locations():
    err = QueryError("bad", locations=[Location(3, 20), Location(4, 1)])
    assert str(err) == "graphql: bad (line 3, column 20) (line 4, column 1)"


def test_location_before():
    assert Location(1, 5).before(Location(2, 1))
    assert Location(2, 1).before(Location(2, 3))
    assert not Location(2, 3).before(Location(2, 3))
    assert not Location(3, 1).before(Location(2, 9))


def test_to_dict_omits_empty_members():
    assert QueryError("x").to_dict() == {"message": "x"}


def test_to_dict_full():
    err = QueryError(
        "x",
        locations=[Location(1, 2)],
        path=["findDroids", 1, "name"],
        extensions={"code": "NotFound"},
    )
    assert err.to_dict() == {
        "message": "x",
        "locations": [{"line": 1, "column": 2}],
        "path": ["findDroids", 1, "name"],
        "extensions": {"code": "NotFound"},
    }


def test_query_error_can_be_raised():
    err = errorf("boom")
    assert str(err) == "graphql: boom"
    with pytest.raises(QueryError) as info:
        raise err
    assert info.value is err
    assert info.value.message == "boom"