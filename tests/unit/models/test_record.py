"""Unit tests for record formatting."""

from airquery.models import format_record, format_records


def test_reserved_keys_override_user_fields():
    raw = {
        "id": "r1",
        "createdTime": "2024-01-01T00:00:00Z",
        "fields": {"name": "x", "id": "should-be-overridden"},
    }

    assert format_record(raw) == {
        "name": "x",
        "createdTime": "2024-01-01T00:00:00Z",
        "id": "r1",
    }


def test_reserved_keys_are_layered_last():
    raw = {"id": "r1", "createdTime": "t", "fields": {"createdTime": "user", "a": 1}}

    assert list(format_record(raw)) == ["a", "createdTime", "id"]


def test_envelope_without_fields_is_returned_unchanged():
    raw = {"id": "r1", "deleted": True}

    assert format_record(raw) is raw


def test_empty_fields_keeps_reserved_keys():
    assert format_record({"id": "r1", "createdTime": "t", "fields": {}}) == {
        "createdTime": "t",
        "id": "r1",
    }


def test_missing_reserved_key_is_not_invented():
    assert format_record({"id": "r1", "fields": {"a": 1}}) == {"a": 1, "id": "r1"}


def test_format_records_preserves_order():
    raws = [{"id": f"r{i}", "fields": {"n": i}} for i in range(5)]

    assert [r["id"] for r in format_records(raws)] == ["r0", "r1", "r2", "r3", "r4"]
