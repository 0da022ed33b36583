"""Tests for response reconciliation."""

from __future__ import annotations

import json

import pytest

from aicommit.core.reconciler import extract_candidates, is_success_status, reconcile
from aicommit.utils.errors import (
    EmptyCompletion,
    HttpError,
    MalformedSuccess,
    ProviderError,
    ReconcileError,
)


def _completion_body(content: str) -> str:
    return json.dumps({"choices": [{"message": {"role": "assistant", "content": content}}]})


class TestExtractCandidates:
    """Test extract_candidates."""

    def test_trims_and_drops_blank_lines(self) -> None:
        """Test that lines are trimmed and blank ones skipped."""
        content = "  feat: add parser  \n\n\t\nfix: handle empty input\n"
        assert extract_candidates(content) == ["feat: add parser", "fix: handle empty input"]

    def test_keeps_model_order(self) -> None:
        """Test that candidate order follows the model output."""
        content = "\n".join(f"chore: step {i}" for i in range(10))
        assert extract_candidates(content) == [f"chore: step {i}" for i in range(10)]

    def test_crlf_line_endings(self) -> None:
        """Test that Windows line endings are handled."""
        assert extract_candidates("feat: a\r\nfix: b\r\n") == ["feat: a", "fix: b"]

    def test_whitespace_only(self) -> None:
        """Test that whitespace-only content yields nothing."""
        assert extract_candidates(" \n\t\n  ") == []


class TestIsSuccessStatus:
    """Test is_success_status."""

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_success(self, status: int) -> None:
        """Test 2xx statuses."""
        assert is_success_status(status) is True

    @pytest.mark.parametrize("status", [199, 300, 401, 429, 500])
    def test_failure(self, status: int) -> None:
        """Test non-2xx statuses."""
        assert is_success_status(status) is False


class TestReconcileSuccess:
    """Test 2xx responses."""

    def test_candidates_from_first_choice(self) -> None:
        """Test that candidates come from the first choice only."""
        body = json.dumps(
            {
                "choices": [
                    {"message": {"role": "assistant", "content": "feat: one\nfix: two"}},
                    {"message": {"role": "assistant", "content": "docs: ignored"}},
                ]
            }
        )
        assert reconcile(200, body) == ["feat: one", "fix: two"]

    def test_extra_fields_ignored(self) -> None:
        """Test that unknown fields in the body are tolerated."""
        body = json.dumps(
            {
                "id": "cmpl-1",
                "usage": {"total_tokens": 12},
                "choices": [
                    {
                        "index": 0,
                        "finish_reason": "stop",
                        "message": {"role": "assistant", "content": "feat: one"},
                    }
                ],
            }
        )
        assert reconcile(200, body) == ["feat: one"]

    def test_empty_content_yields_no_candidates(self) -> None:
        """Test that whitespace-only content is not an error."""
        assert reconcile(200, _completion_body("\n  \n")) == []

    def test_empty_choices(self) -> None:
        """Test that a completion without choices raises EmptyCompletion."""
        with pytest.raises(EmptyCompletion, match="Error no content in response"):
            reconcile(200, json.dumps({"choices": []}))

    def test_not_json(self) -> None:
        """Test that a non-JSON 2xx body raises MalformedSuccess with the raw body."""
        with pytest.raises(MalformedSuccess) as exc_info:
            reconcile(200, "<html>gateway</html>")
        assert exc_info.value.body == "<html>gateway</html>"
        assert "Raw response: <html>gateway</html>" in str(exc_info.value)

    def test_wrong_shape(self) -> None:
        """Test that a JSON body of the wrong shape raises MalformedSuccess."""
        with pytest.raises(MalformedSuccess) as exc_info:
            reconcile(200, json.dumps({"result": "feat: one"}))
        assert "choices" in exc_info.value.diagnostic

    def test_error_body_with_success_status(self) -> None:
        """Test that a structured error under 2xx is still a malformed success."""
        body = json.dumps({"error": {"message": "nope", "type": "invalid_request"}})
        with pytest.raises(MalformedSuccess):
            reconcile(200, body)


class TestReconcileFailure:
    """Test non-2xx responses."""

    def test_structured_provider_error(self) -> None:
        """Test that a structured error body raises ProviderError."""
        body = json.dumps(
            {"error": {"message": "Authentication Fails", "type": "authentication_error"}}
        )
        with pytest.raises(ProviderError) as exc_info:
            reconcile(401, body)
        assert exc_info.value.error_type == "authentication_error"
        assert exc_info.value.message == "Authentication Fails"
        assert str(exc_info.value) == "API Error (authentication_error): Authentication Fails"

    def test_unstructured_body(self) -> None:
        """Test that an arbitrary body raises HttpError with status and body."""
        with pytest.raises(HttpError) as exc_info:
            reconcile(502, "Bad Gateway")
        assert exc_info.value.status == 502
        assert exc_info.value.body == "Bad Gateway"
        assert str(exc_info.value) == "HTTP Error 502: Bad Gateway"

    def test_empty_body(self) -> None:
        """Test that an empty non-2xx body raises HttpError."""
        with pytest.raises(HttpError, match="HTTP Error 500: $"):
            reconcile(500, "")

    def test_completion_body_with_error_status(self) -> None:
        """Test that candidates are never taken from a non-2xx response."""
        with pytest.raises(HttpError):
            reconcile(500, _completion_body("feat: one"))

    def test_error_without_type(self) -> None:
        """Test that an error object missing its type is not structured."""
        body = json.dumps({"error": {"message": "oops"}})
        with pytest.raises(HttpError):
            reconcile(400, body)


class TestReconcileIsPure:
    """Test that reconciliation depends only on its input."""

    @pytest.mark.parametrize(
        "status,body",
        [
            (200, _completion_body("feat: one\nfix: two")),
            (200, "not json"),
            (429, json.dumps({"error": {"message": "slow down", "type": "rate_limit"}})),
            (503, "unavailable"),
        ],
    )
    def test_same_input_same_result(self, status: int, body: str) -> None:
        """Test that repeated calls agree."""

        def outcome() -> object:
            try:
                return reconcile(status, body)
            except ReconcileError as e:
                return (type(e), str(e))

        assert outcome() == outcome()
