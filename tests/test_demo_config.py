import pytest
from pydantic import ValidationError

from polyobj.models.demo_config import DemoConfig, ObjectSpec


def test_defaults_describe_canonical_scenario():
    cfg = DemoConfig()

    assert [(o.kind, o.data) for o in cfg.objects] == [
        ("object", "Data 1"),
        ("special", "Data 2"),
        ("object", "Data 3"),
    ]
    assert cfg.rerender == [0, 1]
    assert cfg.duplicate == 2
    assert cfg.capability_check == 1
    assert cfg.demonstrate_failures is True


def test_object_spec_kind_defaults_to_object():
    assert ObjectSpec(data="x").kind == "object"


def test_unknown_kind_is_rejected():
    with pytest.raises(ValidationError) as exc:
        DemoConfig.model_validate({"objects": [{"kind": "mystery", "data": "x"}]})

    assert "Unknown object kind" in str(exc.value)


def test_out_of_range_index_is_rejected():
    with pytest.raises(ValidationError) as exc:
        DemoConfig.model_validate(
            {"objects": [{"data": "only"}], "rerender": [], "duplicate": 3, "capability_check": None}
        )

    assert "duplicate index 3 is out of range" in str(exc.value)


def test_optional_steps_can_be_disabled():
    cfg = DemoConfig.model_validate(
        {
            "objects": [{"data": "only"}],
            "rerender": [],
            "duplicate": None,
            "capability_check": None,
            "demonstrate_failures": False,
        }
    )

    assert cfg.duplicate is None
    assert cfg.capability_check is None


def test_object_payload_accepts_non_string_values():
    cfg = DemoConfig.model_validate({"objects": [{"data": 42}], "rerender": [0], "duplicate": 0, "capability_check": 0})

    assert cfg.objects[0].data == 42
