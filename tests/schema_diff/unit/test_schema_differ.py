"""Schema differ tests."""

from __future__ import annotations

from typing import Any

from eventdiff.policy import PolicyConfiguration, Severity
from eventdiff.schema_diff import ChangeKind, Decision, diff_schema_documents, diff_schemas
from eventdiff.schema_management import flatten_schema


def _order_schema(**overrides: Any) -> dict[str, Any]:
    properties: dict[str, Any] = {
        "order_id": {"type": "string"},
        "total_amount": {"type": "number"},
        "payment_method": {"type": "string", "enum": ["card", "invoice"]},
    }
    properties.update(overrides.pop("properties", {}))
    schema = {
        "type": "object",
        "properties": properties,
        "required": ["order_id", "total_amount", "payment_method"],
    }
    schema.update(overrides)
    return schema


def _diff(old: dict[str, Any], new: dict[str, Any], owners=(), policy=None):
    return diff_schema_documents(old, new, list(owners), policy or PolicyConfiguration())


def test_identical_snapshots_produce_no_changes() -> None:
    snapshot = flatten_schema(_order_schema())

    result = diff_schemas(snapshot, snapshot, [], PolicyConfiguration())

    assert result.changes == ()
    assert result.summary.decision is Decision.PASS
    assert result.summary.to_dict() == {"decision": "PASS", "blocks": 0, "warns": 0, "passes": 0}


def test_type_change_blocks() -> None:
    result = _diff(
        _order_schema(), _order_schema(properties={"total_amount": {"type": "string"}})
    )

    assert len(result.changes) == 1
    change = result.changes[0]
    assert change.kind is ChangeKind.TYPE_CHANGED
    assert change.path == "total_amount"
    assert change.severity is Severity.BLOCK
    assert change.message == "Type changed 'total_amount': number → string"
    assert result.summary.decision is Decision.FAIL


def test_nullability_change_is_a_type_change() -> None:
    result = _diff(
        _order_schema(),
        _order_schema(properties={"total_amount": {"type": ["number", "null"]}}),
    )

    assert [change.message for change in result.changes] == [
        "Type changed 'total_amount': number → number (nullable)"
    ]


def test_dropping_required_flag_warns_but_file_passes() -> None:
    new = _order_schema(required=["order_id", "total_amount"])

    result = _diff(_order_schema(), new)

    assert [(c.kind, c.severity) for c in result.changes] == [
        (ChangeKind.REQUIRED_BECOMES_OPTIONAL, Severity.WARN)
    ]
    assert result.changes[0].message == "Required → optional: 'payment_method'."
    assert result.summary.warns == 1
    assert result.summary.decision is Decision.PASS


def test_making_field_required_blocks() -> None:
    old = _order_schema(required=["order_id"])

    result = _diff(old, _order_schema())

    assert [c.kind for c in result.changes] == [
        ChangeKind.REQUIRED_BECOMES_REQUIRED,
        ChangeKind.REQUIRED_BECOMES_REQUIRED,
    ]
    assert [c.path for c in result.changes] == ["payment_method", "total_amount"]
    assert result.changes[0].message == "Optional → required: 'payment_method'."
    assert result.summary.blocks == 2


def test_added_optional_field_passes() -> None:
    new = _order_schema(properties={"coupon_code": {"type": "string"}})

    result = _diff(_order_schema(), new)

    assert len(result.changes) == 1
    assert result.changes[0].kind is ChangeKind.FIELD_ADDED
    assert result.changes[0].severity is Severity.PASS
    assert result.changes[0].message == "Added optional field 'coupon_code'."
    assert (result.summary.blocks, result.summary.warns, result.summary.passes) == (0, 0, 1)


def test_added_required_field_blocks() -> None:
    new = _order_schema(
        properties={"coupon_code": {"type": "string"}},
        required=["order_id", "total_amount", "payment_method", "coupon_code"],
    )

    result = _diff(_order_schema(), new)

    assert result.changes[0].message == "Added required field 'coupon_code'."
    assert result.changes[0].severity is Severity.BLOCK


def test_removed_fields_are_classified_by_required_flag() -> None:
    old = _order_schema(properties={"note": {"type": "string"}})
    new = {"type": "object", "properties": {"payment_method": {"type": "string"}}}

    result = _diff(old, new)

    removed = [(c.path, c.severity, c.message) for c in result.changes]
    assert ("note", Severity.WARN, "Removed optional field 'note'.") in removed
    assert ("order_id", Severity.BLOCK, "Removed required field 'order_id'.") in removed


def test_enum_changes_emit_one_record_per_direction() -> None:
    new = _order_schema(
        properties={"payment_method": {"type": "string", "enum": ["wallet", "card", "bnpl"]}}
    )

    result = _diff(_order_schema(), new)

    assert [(c.kind, c.severity, c.message) for c in result.changes] == [
        (
            ChangeKind.ENUM_VALUE_REMOVED,
            Severity.BLOCK,
            "Enum removed from 'payment_method': invoice",
        ),
        (
            ChangeKind.ENUM_VALUE_ADDED,
            Severity.PASS,
            "Enum added to 'payment_method': bnpl, wallet",
        ),
    ]


def test_one_path_can_emit_several_independent_changes() -> None:
    new = _order_schema(
        properties={"payment_method": {"type": ["string", "null"], "enum": ["card"]}},
        required=["order_id", "total_amount"],
    )

    result = _diff(_order_schema(), new)

    assert [c.kind for c in result.changes] == [
        ChangeKind.REQUIRED_BECOMES_OPTIONAL,
        ChangeKind.TYPE_CHANGED,
        ChangeKind.ENUM_VALUE_REMOVED,
    ]


def test_changes_are_ordered_by_path_and_deterministic() -> None:
    old = {"properties": {"b": {"type": "string"}, "a": {"type": "string"}}}
    new = {
        "properties": {
            "c": {"type": "string"},
            "a": {"type": "integer"},
            "a_sub": {"type": "object", "properties": {"x": {"type": "string"}}},
        }
    }

    first = _diff(old, new)
    second = _diff(old, new)

    assert [c.path for c in first.changes] == ["a", "a_sub", "a_sub.x", "b", "c"]
    assert first == second


def test_owner_overrides_raise_severity_per_change() -> None:
    policy = PolicyConfiguration(
        overrides_by_owner={"payments": {"FIELD_ADDED_OPTIONAL": Severity.WARN}}
    )
    new = _order_schema(properties={"coupon_code": {"type": "string"}})

    result = _diff(_order_schema(), new, owners=["payments"], policy=policy)

    assert result.changes[0].severity is Severity.WARN
    assert result.summary.warns == 1
