import json
import re

from pvschema import ErrorStatus, ValidationError, validate


def password_rules(value, pointer):
    return {
        "minLength": len(value) > 5,
        "capitalLetter": re.search(r"[A-Z]", value) is not None,
    }


class TestValidationResult:
    schema = {
        "firstName": lambda value, pointer: value == "john",
        "password": password_rules,
        "billingDetails": {"country": lambda value, pointer: value in ["uk", "us"]},
    }
    data = {"password": "wrong", "billingDetails": {"country": "it"}}

    def test_counts(self):
        result = validate(self.schema, self.data)
        assert not result.is_valid
        assert result.num_errors == 4
        assert [error.pointer for error in result.missing_errors] == [("firstName",)]
        assert [error.pointer for error in result.invalid_errors] == [
            ("password",),
            ("password",),
            ("billingDetails", "country"),
        ]

    def test_errors_per_pointer(self):
        result = validate(self.schema, self.data)
        assert list(result.errors_per_pointer) == [("firstName",), ("password",), ("billingDetails", "country")]
        assert len(result.errors_per_pointer[("password",)]) == 2

    def test_failed_rules_per_pointer(self):
        result = validate(self.schema, self.data)
        assert result.failed_rules_per_pointer == {("password",): ["minLength", "capitalLetter"]}

    def test_to_dicts(self):
        result = validate(self.schema, self.data)
        assert result.to_dicts() == [
            {"pointer": ["firstName"], "status": "missing"},
            {"pointer": ["password"], "status": "invalid", "value": "wrong", "rule": "minLength"},
            {"pointer": ["password"], "status": "invalid", "value": "wrong", "rule": "capitalLetter"},
            {"pointer": ["billingDetails", "country"], "status": "invalid", "value": "it"},
        ]
        assert json.loads(json.dumps(result.to_dicts())) == result.to_dicts()

    def test_valid_result(self):
        data = {"firstName": "john", "password": "PassWord", "billingDetails": {"country": "uk"}}
        result = validate(self.schema, data)
        assert result.is_valid
        assert result.missing_errors == []
        assert result.errors_per_pointer == {}
        assert result.to_dicts() == []


class TestValidationErrorRecord:
    def test_str(self):
        assert str(ValidationError(pointer=("a", "b"), status=ErrorStatus.MISSING)) == "a.b: missing"
        invalid = ValidationError(pointer=("password",), status=ErrorStatus.INVALID, value="wrong", rule="minLength")
        assert str(invalid) == "password.minLength: invalid value 'wrong'"

    def test_status_is_string_valued(self):
        assert ErrorStatus.MISSING == "missing"
        assert ErrorStatus.INVALID == "invalid"
