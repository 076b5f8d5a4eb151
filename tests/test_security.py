"""Unit tests for the audit logger."""

from unittest.mock import Mock

from categorycore.security.audit import AuditLogger, sanitize_value


class TestAuditLogger:
    """Test audit trail events."""

    def test_log_data_access(self):
        sink = Mock()
        audit = AuditLogger(logger=sink)

        audit.log_data_access(operation="read", resource_type="category", resource_id="cat-1")

        sink.info.assert_called_once()
        assert sink.info.call_args.args == ("data_access",)
        kwargs = sink.info.call_args.kwargs
        assert kwargs["event_type"] == "data_access"
        assert kwargs["operation"] == "read"
        assert kwargs["resource_type"] == "category"
        assert kwargs["resource_id"] == "cat-1"
        assert len(kwargs["access_hash"]) == 16
        assert "audit_timestamp" in kwargs
        assert kwargs["audit_timestamp"].endswith("+00:00")

    def test_access_hash_is_stable(self):
        sink = Mock()
        audit = AuditLogger(logger=sink)

        audit.log_data_access("delete", "category", "cat-1")
        audit.log_data_access("delete", "category", "cat-1")
        audit.log_data_access("delete", "category", "cat-2")

        hashes = [c.kwargs["access_hash"] for c in sink.info.call_args_list]
        assert hashes[0] == hashes[1]
        assert hashes[0] != hashes[2]

    def test_log_data_access_without_resource_id(self):
        sink = Mock()
        audit = AuditLogger(logger=sink)

        audit.log_data_access(operation="list", resource_type="category")

        assert sink.info.call_args.kwargs["resource_id"] is None

    def test_log_error(self):
        sink = Mock()
        audit = AuditLogger(logger=sink)

        audit.log_error(
            error_type="GetCategoryFailure",
            error_message="Failed to get category: down",
            stack_trace="Traceback ...",
            context={"operation": "repository.get_category"},
        )

        sink.error.assert_called_once()
        assert sink.error.call_args.args == ("application_error",)
        kwargs = sink.error.call_args.kwargs
        assert kwargs["error_type"] == "GetCategoryFailure"
        assert kwargs["stack_trace"] == "Traceback ..."
        assert kwargs["error_context"] == {"operation": "repository.get_category"}

    def test_disabled_logger_is_silent(self):
        sink = Mock()
        audit = AuditLogger(enabled=False, logger=sink)

        audit.log_data_access("read", "category", "cat-1")
        audit.log_error("X", "y")

        sink.info.assert_not_called()
        sink.error.assert_not_called()

    def test_sensitive_context_is_masked(self):
        sink = Mock()
        audit = AuditLogger(logger=sink)

        audit.log_error(
            "GetCategoriesFailure",
            "boom",
            context={"request_data": {"api_key": "sk-1234567890abcdef", "limit": 10}},
        )

        request_data = sink.error.call_args.kwargs["error_context"]["request_data"]
        assert request_data["api_key"] == "sk-1...cdef"
        assert request_data["limit"] == 10


class TestSanitizeValue:
    """Test masking of sensitive values."""

    def test_short_secret_fully_redacted(self):
        assert sanitize_value("password", "hunter2") == "***REDACTED***"

    def test_non_string_secret_redacted(self):
        assert sanitize_value("token", 12345) == "***REDACTED***"

    def test_nested_structures(self):
        value = {"items": [{"secret": "x"}], "name": "Books"}

        assert sanitize_value("payload", value) == {
            "items": [{"secret": "***REDACTED***"}],
            "name": "Books",
        }
