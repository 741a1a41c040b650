from __future__ import annotations

import pytest

from ryandata_widget_validation.validation import (
    ArrayValidator,
    ChartDataValidator,
    MarkersValidator,
    ObjectValidator,
    OptionsDataValidator,
    TableDataValidator,
)

# =============================================================================
# Object
# =============================================================================


class TestObjectValidator:
    def setup_method(self) -> None:
        self.validator = ObjectValidator()

    def test_record_passes(self) -> None:
        value = {"a": 1}
        response = self.validator.validate(value)
        assert response.is_valid
        assert response.parsed is value

    def test_json_text_is_decoded(self) -> None:
        assert self.validator.validate('{"a": [1, 2]}').as_tuple() == (True, {"a": [1, 2]}, "")

    def test_list_counts_as_structured(self) -> None:
        assert self.validator.validate("[1, 2]").parsed == [1, 2]
        assert self.validator.validate([1]).is_valid

    @pytest.mark.parametrize("value", [None, "not json", "5", '"text"', 5, True])
    def test_invalid_defaults_to_empty_dict(self, value: object) -> None:
        assert self.validator.validate(value).as_tuple() == (
            False,
            {},
            "Value does not match type: Object",
        )

    def test_default_is_fresh(self) -> None:
        first = self.validator.validate(None).parsed
        first["mutated"] = True
        assert self.validator.validate(None).parsed == {}


# =============================================================================
# Array
# =============================================================================


class TestArrayValidator:
    def setup_method(self) -> None:
        self.validator = ArrayValidator()

    def test_json_text_is_decoded(self) -> None:
        assert self.validator.validate("[1,2,3]").as_tuple() == (True, [1, 2, 3], "")

    def test_list_and_tuple_pass(self) -> None:
        assert self.validator.validate([1, "a"]).parsed == [1, "a"]
        assert self.validator.validate((1, 2)).parsed == (1, 2)

    def test_elements_are_not_checked(self) -> None:
        assert self.validator.validate([None, {}, [1]]).is_valid

    @pytest.mark.parametrize("value", [None, "not json", {}, '{"a": 1}', "5", 5, "true"])
    def test_invalid_defaults_to_empty_list(self, value: object) -> None:
        assert self.validator.validate(value).as_tuple() == (
            False,
            [],
            "Value does not match type: Array/List",
        )


# =============================================================================
# Shaped arrays
# =============================================================================

RECORD_VALIDATORS = [
    (TableDataValidator, "Table Data"),
    (ChartDataValidator, "Chart Data"),
    (MarkersValidator, "Marker Data"),
]


@pytest.mark.parametrize(("validator_cls", "label"), RECORD_VALIDATORS)
class TestRecordArrayValidators:
    def test_records_pass(self, validator_cls: type, label: str) -> None:
        rows = [{"name": "Ada"}, {"name": "Grace"}]
        assert validator_cls().validate(rows).as_tuple() == (True, rows, "")

    def test_json_text_is_decoded(self, validator_cls: type, label: str) -> None:
        assert validator_cls().validate('[{"x": 1, "y": 2}]').parsed == [{"x": 1, "y": 2}]

    def test_empty_list_is_valid(self, validator_cls: type, label: str) -> None:
        assert validator_cls().validate([]).is_valid

    def test_one_bad_element_rejects_all(self, validator_cls: type, label: str) -> None:
        assert validator_cls().validate([{"name": "Ada"}, 2]).as_tuple() == (
            False,
            [],
            f"Value does not match type: {label}",
        )

    @pytest.mark.parametrize("value", [None, "not json", {}])
    def test_array_failure_uses_shape_label(
        self, validator_cls: type, label: str, value: object
    ) -> None:
        assert validator_cls().validate(value).as_tuple() == (
            False,
            [],
            f"Value does not match type: {label}",
        )


class TestOptionsDataValidator:
    def setup_method(self) -> None:
        self.validator = OptionsDataValidator()

    def test_valid_options(self) -> None:
        options = [{"label": "A", "value": "1"}, {"label": "B", "value": "2", "extra": 3}]
        assert self.validator.validate(options).as_tuple() == (True, options, "")

    @pytest.mark.parametrize(
        "options",
        [
            [{"label": "A"}],
            [{"value": "1"}],
            [{"label": "A", "value": 1}],
            [{"label": None, "value": "1"}],
            ["A"],
            [{"label": "A", "value": "1"}, "B"],
        ],
    )
    def test_malformed_options_reject_all(self, options: list) -> None:
        assert self.validator.validate(options).as_tuple() == (
            False,
            [],
            "Value does not match type: Options Data",
        )

    def test_json_text_options(self) -> None:
        assert self.validator.validate('[{"label": "A", "value": "a"}]').is_valid
