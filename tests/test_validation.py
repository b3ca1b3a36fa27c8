# tests/test_validation.py

from __future__ import annotations

from rest_framework.exceptions import ErrorDetail

from taskboard_app.exceptions import flatten_errors
from taskboard_app.serializers import ContextInputSerializer, TaskInputSerializer


def _messages(serializer) -> dict:
    return {field: [str(m) for m in msgs] for field, msgs in serializer.errors.items()}


def test_task_requires_name_and_description() -> None:
    serializer = TaskInputSerializer(data={})

    assert not serializer.is_valid()
    errors = _messages(serializer)
    assert errors["name"] == ["Item name is required"]
    assert errors["description"] == ["Description is required"]
    assert "comments" not in errors
    assert "contextId" not in errors


def test_task_length_limits() -> None:
    serializer = TaskInputSerializer(
        data={"name": "n" * 51, "description": "d" * 201, "comments": "c" * 1001}
    )

    assert not serializer.is_valid()
    errors = _messages(serializer)
    assert errors["name"] == ["Item name cannot exceed 50 characters"]
    assert errors["description"] == ["Description cannot exceed 200 characters"]
    assert errors["comments"] == ["Comments cannot exceed 1000 characters"]


def test_task_boundaries_are_accepted() -> None:
    serializer = TaskInputSerializer(
        data={"name": "n" * 50, "description": "d" * 200, "comments": "c" * 1000, "contextId": 2}
    )

    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["context_id"] == 2


def test_context_id_must_be_numeric() -> None:
    serializer = TaskInputSerializer(data={"name": "a", "description": "b", "contextId": "abc"})

    assert not serializer.is_valid()
    assert _messages(serializer)["contextId"] == ["Context ID must be a number"]


def test_partial_validation_only_checks_supplied_fields() -> None:
    serializer = TaskInputSerializer(data={"comments": None}, partial=True)

    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data == {"comments": None}


def test_context_name_is_required() -> None:
    serializer = ContextInputSerializer(data={"name": ""})

    assert not serializer.is_valid()
    assert _messages(serializer)["name"] == ["Context name is required"]


def test_flatten_errors_builds_field_message_pairs() -> None:
    detail = {
        "name": [ErrorDetail("Item name is required", code="required")],
        "description": [ErrorDetail("Description is required", code="required")],
    }

    assert flatten_errors(detail) == [
        {"field": "name", "message": "Item name is required"},
        {"field": "description", "message": "Description is required"},
    ]


def test_flatten_errors_handles_nested_and_bare_details() -> None:
    assert flatten_errors({"context": {"name": ["bad"]}}) == [
        {"field": "context.name", "message": "bad"}
    ]
    assert flatten_errors(["oops"]) == [{"field": "non_field_errors", "message": "oops"}]


def test_context_id_rejects_strings_floats_and_booleans() -> None:
    for value in ("2", 1.0, True):
        serializer = TaskInputSerializer(data={"name": "a", "description": "b", "contextId": value})

        assert not serializer.is_valid(), value
        assert _messages(serializer)["contextId"] == ["Context ID must be a number"]


def test_text_fields_reject_non_strings() -> None:
    serializer = TaskInputSerializer(data={"name": 123, "description": True, "comments": 5})

    assert not serializer.is_valid()
    assert set(_messages(serializer)) == {"name", "description", "comments"}

    context = ContextInputSerializer(data={"name": 7})
    assert not context.is_valid()
    assert "name" in context.errors


def test_whitespace_is_kept_as_sent() -> None:
    serializer = TaskInputSerializer(data={"name": "   ", "description": " 2% milk ", "comments": "  "})

    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["name"] == "   "
    assert serializer.validated_data["description"] == " 2% milk "
    assert serializer.validated_data["comments"] == "  "

    context = ContextInputSerializer(data={"name": " Errands "})
    assert context.is_valid(), context.errors
    assert context.validated_data["name"] == " Errands "
