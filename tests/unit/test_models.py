"""
Unit tests for ErrorObject and Errors.
"""

import pytest
from pydantic import ValidationError

from fieldcheck.core.models import ErrorObject, Errors, RuleConfigurationError, new_error


class TestErrorObject:
    """Tests for ErrorObject rendering and copies"""

    def test_renders_template_with_params(self):
        """Test named placeholders are substituted from params"""
        err = ErrorObject(code="min", message="must be at least {threshold}", params={"threshold": 18})
        assert err.error() == "must be at least 18"

    def test_renders_verbatim_without_params(self):
        """Test the template is returned untouched when params are empty"""
        err = new_error("custom", "must be {unrendered}")
        assert err.error() == "must be {unrendered}"
        assert err.params == {}

    def test_missing_placeholder_is_configuration_error(self):
        """Test a template naming an absent param fails loudly"""
        err = ErrorObject(code="min", message="must be at least {threshold}", params={"bound": 18})

        with pytest.raises(RuleConfigurationError) as exc_info:
            err.error()

        assert exc_info.value.rule_type == "min"
        assert "threshold" in str(exc_info.value)

    @pytest.mark.parametrize("template", ["must be at least {threshold:zz}", "must be at least {threshold.x}"])
    def test_unrenderable_template_is_configuration_error(self, template):
        """Test bad format specs and attribute lookups fail as configuration errors"""
        err = ErrorObject(code="min", message=template, params={"threshold": 18})

        with pytest.raises(RuleConfigurationError) as exc_info:
            err.error()

        assert exc_info.value.rule_type == "min"

    def test_with_message_keeps_code_and_params(self):
        """Test with_message returns a modified copy"""
        err = ErrorObject(code="min", message="must be at least {threshold}", params={"threshold": 3})
        custom = err.with_message("at least {threshold} please")

        assert custom.code == "min"
        assert custom.error() == "at least 3 please"
        assert err.message == "must be at least {threshold}"

    def test_with_params_and_code(self):
        """Test with_params and with_code return modified copies"""
        err = new_error("a", "between {min} and {max}")
        updated = err.with_params({"min": 1, "max": 3}).with_code("b")

        assert updated.code == "b"
        assert updated.error() == "between 1 and 3"
        assert err.params == {}

    def test_is_frozen(self):
        """Test ErrorObject cannot be mutated"""
        err = new_error("a", "b")
        with pytest.raises(ValidationError):
            err.code = "c"

    def test_to_detail_and_str(self):
        """Test serialization helpers render the message"""
        err = ErrorObject(code="len", message="no more than {max}", params={"max": 5})
        assert err.to_detail() == {"code": "len", "message": "no more than 5"}
        assert str(err) == "no more than 5"

    def test_equality_is_by_value(self):
        """Test two errors with the same content compare equal"""
        assert new_error("a", "b") == new_error("a", "b")
        assert new_error("a", "b") != new_error("a", "c")


class TestErrors:
    """Tests for the Errors mapping"""

    def test_empty_errors_is_falsy_and_renders_nothing(self):
        """Test an empty report renders as an empty string"""
        errors = Errors()
        assert not errors
        assert errors.error() == ""

    def test_last_write_wins(self):
        """Test writing the same field twice keeps the later error"""
        errors = Errors()
        errors["age"] = new_error("first", "first")
        errors["age"] = new_error("second", "second")

        assert len(errors) == 1
        assert errors["age"].code == "second"

    def test_error_lists_fields_in_insertion_order(self):
        """Test rendering joins fields with '; ' and ends with '.'"""
        errors = Errors()
        errors["name"] = new_error("required", "cannot be blank")
        errors["age"] = ErrorObject(code="min", message="must be no less than {threshold}", params={"threshold": 18})

        assert errors.error() == "name: cannot be blank; age: must be no less than 18."
        assert str(errors) == errors.error()

    def test_nested_errors_render_in_parentheses(self):
        """Test nested reports are rendered inside their parent"""
        nested = Errors({"2": new_error("min", "too small")})
        errors = Errors({"ages": nested})

        assert errors.error() == "ages: (2: too small.)."

    def test_empty_nested_errors_are_not_rendered(self):
        """Test nested reports without failures leave no trace in the message"""
        errors = Errors({
            "name": new_error("required", "cannot be blank"),
            "tags": Errors(),
            "ages": Errors({"0": None}),
        })

        assert errors.error() == "name: cannot be blank."
        assert Errors({"tags": Errors()}).error() == ""

    def test_filter_drops_none_entries(self):
        """Test filter removes empty entries and returns a new report"""
        errors = Errors({"a": None, "b": new_error("x", "y")})
        filtered = errors.filter()

        assert list(filtered) == ["b"]
        assert "a" in errors

    def test_filter_returns_none_when_nothing_left(self):
        """Test filter signals 'valid' with None"""
        assert Errors({"a": None}).filter() is None
        assert Errors().filter() is None

    def test_to_dict_nests_rendered_messages(self):
        """Test to_dict produces JSON-ready nested dictionaries"""
        errors = Errors({
            "name": new_error("required", "cannot be blank"),
            "tags": Errors({"0": new_error("length", "too long")}),
            "skipped": None,
        })

        assert errors.to_dict() == {
            "name": "cannot be blank",
            "tags": {"0": "too long"},
        }

    def test_to_details_includes_codes(self):
        """Test to_details keeps codes next to messages"""
        errors = Errors({"tags": Errors({"1": new_error("in", "must be a valid value")})})

        assert errors.to_details() == {
            "tags": {"1": {"code": "in", "message": "must be a valid value"}}
        }
