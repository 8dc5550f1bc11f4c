"""Tests for the success/fail/error convenience constructors."""

from __future__ import annotations

from jshape.core.projector.project import ErrorResult
from jshape.core.schema.model import load_schema
from jshape.envelopes import coerce, error, fail, success

CUSTOM = load_schema(
    {
        "success": {"required": ["status", "payload"]},
        "fail": {"required": ["status", "reason"]},
    }
)


class TestSuccessAndFail:
    """Tests for success and fail."""

    def test_success(self):
        """success wraps the payload as data."""
        assert success([1, 2, 3]) == {"status": "success", "data": [1, 2, 3]}

    def test_fail(self):
        """fail wraps the payload as data."""
        assert fail({"title": "required"}) == {"status": "fail", "data": {"title": "required"}}

    def test_none_payload_is_error(self):
        """A None payload yields the error envelope."""
        assert isinstance(success(None), ErrorResult)
        assert isinstance(fail(None), ErrorResult)

    def test_falsy_payload_is_kept(self):
        """Empty lists and zero are real payloads."""
        assert success([]) == {"status": "success", "data": []}
        assert fail(0) == {"status": "fail", "data": 0}

    def test_custom_schema_field(self):
        """Custom schemas receive the payload under their own field."""
        assert success("x", CUSTOM) == {"payload": "x", "status": "success"}
        assert fail("bad", CUSTOM) == {"reason": "bad", "status": "fail"}

    def test_custom_schema_without_fallback(self):
        """With the fallback off, the default data field is kept."""
        result = success("x", CUSTOM, compound_fallback=False)
        assert result == {"status": "success", "data": "x"}


class TestError:
    """Tests for error."""

    def test_message_only(self):
        """A message alone produces an error envelope."""
        assert error("boom") == {"status": "error", "message": "boom"}

    def test_code_kept_with_message(self):
        """A code is kept alongside the message and status."""
        result = error("boom", code=503)
        assert result == {"status": "error", "message": "boom", "code": 503}
        assert not isinstance(result, ErrorResult)

    def test_empty_message_allowed(self):
        """An empty string is still a valid message."""
        result = error("")
        assert result == {"status": "error", "message": ""}
        assert not isinstance(result, ErrorResult)

    def test_non_string_message(self):
        """A non-string message yields the error envelope."""
        assert isinstance(error(404), ErrorResult)  # type: ignore[arg-type]


class TestCoerce:
    """Tests for coerce."""

    def test_overrides_status(self):
        """The given status replaces the candidate's own."""
        result = coerce({"status": "error", "data": 5}, "success")
        assert result == {"status": "success", "data": 5}

    def test_adds_status(self):
        """A candidate without status gets one."""
        assert coerce({"message": "m", "code": 1}, "error") == {
            "status": "error",
            "message": "m",
            "code": 1,
        }

    def test_non_mapping(self):
        """Non-mappings yield the error envelope."""
        assert isinstance(coerce("oops", "success"), ErrorResult)

    def test_input_not_mutated(self):
        """The candidate is copied, not modified."""
        src = {"data": 1}
        coerce(src, "success")
        assert src == {"data": 1}
