"""Tests for payload decoding and status label helpers."""

import pytest

from kanban_mcp import UNSET_STATUS_LABEL, MalformedPushPayload
from kanban_mcp.utils.payloads import (
    decode_push_payload,
    denormalize_status_label,
    normalize_state_payload,
    normalize_status_label,
    sanitize_task_list,
    sanitize_task_record,
)


class TestDecodePushPayload:
    """Tests for strict and forgiving payload decoding."""

    @pytest.mark.parametrize("raw", [None, "", b"", 0, {}])
    def test_empty_inputs(self, raw):
        """Test empty inputs decode to {}."""
        assert decode_push_payload(raw) == {}

    def test_bytes_payload(self):
        """Test JSON bytes are decoded."""
        assert decode_push_payload(b'{"a": 1}') == {"a": 1}

    def test_non_object_json_is_empty(self):
        """Test JSON that is not an object decodes to {}."""
        assert decode_push_payload("[1, 2]") == {}
        assert decode_push_payload("null") == {}

    def test_unsupported_type_is_empty(self):
        """Test non-string, non-mapping payloads decode to {}."""
        assert decode_push_payload(["a"]) == {}

    def test_malformed_raises(self):
        """Test the strict decoder raises MalformedPushPayload."""
        with pytest.raises(MalformedPushPayload):
            decode_push_payload("{oops")

    def test_forgiving_decoder(self):
        """Test normalize_state_payload swallows malformed input."""
        assert normalize_state_payload("{oops") == {}
        assert normalize_state_payload('{"ok": true}') == {"ok": True}


class TestSanitizeTasks:
    """Tests for host task list sanitization."""

    def test_rejects_non_mapping_and_blank_title(self):
        """Test invalid records are rejected."""
        assert sanitize_task_record("task") is None
        assert sanitize_task_record({"タスク": "  "}) is None
        assert sanitize_task_record({}) is None

    def test_trims_title_and_fills_no(self):
        """Test the title is trimmed and a missing No is filled."""
        record = sanitize_task_record({"タスク": " A ", "No": " ", "extra": 1}, fallback_index=4)
        assert record == {"タスク": "A", "No": 5, "extra": 1}

    def test_english_title_key(self):
        """Test records keyed by 'title' are accepted."""
        assert sanitize_task_record({"title": "B", "No": 3}) == {"title": "B", "No": 3}

    def test_does_not_mutate_input(self):
        """Test the input mapping is left untouched."""
        raw = {"タスク": " A "}
        sanitize_task_record(raw)
        assert raw == {"タスク": " A "}

    def test_list_fallback_index_counts_kept_records(self):
        """Test fallback numbering skips rejected records."""
        result = sanitize_task_list([{"タスク": ""}, {"タスク": "A"}, None, {"タスク": "B"}])
        assert [r["No"] for r in result] == [1, 2]

    def test_list_rejects_non_list(self):
        """Test non-list input yields []."""
        assert sanitize_task_list({"タスク": "A"}) == []


class TestStatusLabels:
    """Tests for the unset status placeholder."""

    def test_round_trip_of_blank_status(self):
        """Test blank statuses display as the placeholder and map back."""
        assert normalize_status_label("") == UNSET_STATUS_LABEL
        assert normalize_status_label(None) == UNSET_STATUS_LABEL
        assert denormalize_status_label(UNSET_STATUS_LABEL) == ""

    def test_regular_status_passes_through(self):
        """Test ordinary statuses are only trimmed."""
        assert normalize_status_label(" 完了 ") == "完了"
        assert denormalize_status_label(" 完了 ") == "完了"
