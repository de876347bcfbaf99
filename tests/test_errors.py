from hexmcts.errors import (
    HexMCTSError,
    InvalidMoveError,
    InvalidTreeError,
    NoChildrenError,
    ProtocolError,
    RolloutError,
)


class TestErrorFormatting:
    def test_plain_message(self):
        assert str(RolloutError("board filled")) == "[ROLLOUT_FAILED] board filled"

    def test_context_in_message(self):
        err = InvalidMoveError("occupied", context={"action": (5, 5)})
        assert str(err) == "[INVALID_MOVE] occupied (action=(5, 5))"

    def test_code_override(self):
        err = HexMCTSError("boom", code="CUSTOM")
        assert err.code == "CUSTOM"
        assert str(err) == "[CUSTOM] boom"

    def test_to_dict(self):
        err = ProtocolError("bad line", context={"line": "x"})
        assert err.to_dict() == {
            "code": "PROTOCOL_ERROR",
            "message": "bad line",
            "context": {"line": "x"},
        }


class TestHierarchy:
    def test_no_children_is_tree_error(self):
        err = NoChildrenError("leaf")
        assert isinstance(err, InvalidTreeError)
        assert isinstance(err, HexMCTSError)
        assert err.code == "NO_CHILDREN"

    def test_all_are_engine_errors(self):
        for cls in (InvalidMoveError, InvalidTreeError, RolloutError, ProtocolError):
            assert issubclass(cls, HexMCTSError)
