"""Tests for the Validatable mixin on an Attributes-backed class."""

import re

import pytest

from validatable import (
    Attributes,
    ConfigurationError,
    UnknownPredicateError,
    UnknownRuleError,
    Validatable,
    validation_predicate,
)


pytestmark = pytest.mark.short


class DummyClass(Attributes, Validatable):
    attribute_names = [
        "num1", "num2", "num3", "enum1", "enum2", "str1", "str2", "str3", "str4",
        "not_null1", "not_empty1", "custom_message1",
    ]

    validations = {
        "num1": {"isNumeric": True},
        "num2": {"isLessThan": 10},
        "num3": {"isMoreThan": 15},
        "enum1": {"isOneOf": [1, 2, 3]},
        "enum2": {"isNotOneOf": [1, 2, 3]},
        "str1": {"isLongerThan": 5},
        "str2": {"isShorterThan": 10},
        "str3": {"hasExactLengthOf": 20},
        "str4": {"matches": re.compile(r"^You're the one")},
        "not_null1": {"isNotNull": True},
        "not_empty1": {"isNotEmpty": True},
        "custom_message1": {"isNotEmpty": {"value": True, "message": "CUSTOM MESSAGE"}},
    }


class Employee(Attributes, Validatable):
    attribute_names = ["first_name", "phone", "email"]

    validations = {
        "first_name": {"isLongerThan": 1},
        "phone": {"function": {"name": "contactable", "message": "needs a phone or an email"}},
        "email": {"function": {"name": "email_has_domain", "message": "needs a domain"}},
    }

    @validation_predicate("contactable")
    def has_contact(self):
        return bool(self.phone or self.email)

    @validation_predicate
    def email_has_domain(self):
        return self.email is None or "." in self.email.split("@")[-1]


@pytest.fixture
def dummy():
    return DummyClass()


def check(obj, field_name, failing, passing):
    setattr(obj, field_name, failing)
    obj.validate()
    assert obj.validation_errors[field_name], f"{failing!r} should fail"
    setattr(obj, field_name, passing)
    obj.validate()
    assert obj.validation_errors[field_name] == (), f"{passing!r} should pass"


class TestNumericValidations:
    def test_validates_field_is_numeric(self, dummy):
        check(dummy, "num1", "non numeric value", "100")

    def test_validates_less_than(self, dummy):
        check(dummy, "num2", "12", "9")

    def test_validates_more_than(self, dummy):
        check(dummy, "num3", "14", "17")


class TestEnumValidations:
    def test_validates_is_one_of(self, dummy):
        check(dummy, "enum1", 14, 1)

    def test_validates_is_not_one_of(self, dummy):
        check(dummy, "enum2", 1, 14)


class TestStringValidations:
    def test_validates_longer_than(self, dummy):
        check(dummy, "str1", "hello", "hello world")

    def test_validates_shorter_than(self, dummy):
        check(dummy, "str2", "hello world", "hello")

    def test_validates_exact_length(self, dummy):
        check(dummy, "str3", "12345678901234567890a", "12345678901234567890")

    def test_validates_pattern(self, dummy):
        check(dummy, "str4", "I know, you're the one", "You're the one")

    def test_validates_not_null(self, dummy):
        check(dummy, "not_null1", None, "")

    def test_validates_not_empty(self, dummy):
        check(dummy, "not_empty1", "", "not empty")

    def test_custom_message(self, dummy):
        dummy.custom_message1 = ""
        dummy.validate()
        assert dummy.validation_errors["custom_message1"][0] == "CUSTOM MESSAGE"


class TestValidateState:
    """Test the state validate() leaves on the object."""

    def test_valid_before_first_call(self, dummy):
        assert dummy.valid is True
        assert dummy.validation_errors == {}
        assert dummy.last_report is None

    def test_one_entry_per_declared_field(self, dummy):
        dummy.validate()
        assert set(dummy.validation_errors) == set(DummyClass.validations)

    def test_valid_iff_no_errors(self, dummy):
        dummy.validate()
        assert dummy.valid is False
        assert dummy.valid == all(not e for e in dummy.validation_errors.values())

    def test_all_fields_passing(self):
        obj = DummyClass(
            num1="100", num2="9", num3="17", enum1=1, enum2=14, str1="hello world",
            str2="hello", str3="12345678901234567890", str4="You're the one",
            not_null1="", not_empty1="x", custom_message1="y",
        )
        obj.validate()
        assert obj.valid is True
        assert all(errors == () for errors in obj.validation_errors.values())

    def test_idempotent(self, dummy):
        dummy.str1 = "abc"
        dummy.validate()
        first_errors, first_valid = dummy.validation_errors, dummy.valid
        dummy.validate()
        assert dummy.validation_errors == first_errors
        assert dummy.valid == first_valid

    def test_previous_errors_are_discarded(self, dummy):
        dummy.num1 = "abc"
        dummy.validate()
        assert dummy.validation_errors["num1"] == ("is not a number",)
        dummy.num1 = "123"
        dummy.validate()
        assert dummy.validation_errors["num1"] == ()

    def test_last_report_matches_errors(self, dummy):
        dummy.validate()
        assert dummy.last_report.errors == dummy.validation_errors
        assert dummy.last_report.valid == dummy.valid

    def test_empty_declaration(self):
        class Blank(Attributes, Validatable):
            attribute_names = ["a"]

        blank = Blank(a=None)
        blank.validate()
        assert blank.valid is True
        assert blank.validation_errors == {}

    def test_unknown_rule_raises_and_keeps_state(self, dummy):
        class Broken(Attributes, Validatable):
            attribute_names = ["a"]
            validations = {"a": {"isPrime": True}}

        broken = Broken(a=3)
        with pytest.raises(UnknownRuleError) as excinfo:
            broken.validate()
        assert "Broken" in str(excinfo.value)
        assert broken.validation_errors == {}
        assert broken.valid is True


class TestPredicates:
    """Test `function` rules backed by predicate methods."""

    def test_predicates_are_collected(self):
        assert Employee.validation_predicates == {
            "contactable": "has_contact",
            "email_has_domain": "email_has_domain",
        }

    def test_predicate_messages(self):
        employee = Employee(first_name="Vincent", email="vincent@vega")
        employee.validate()
        assert employee.validation_errors == {
            "first_name": (),
            "phone": (),
            "email": ("needs a domain",),
        }

        employee.email = None
        employee.validate()
        assert employee.validation_errors["phone"] == ("needs a phone or an email",)
        assert employee.validation_errors["email"] == ()

    def test_predicates_inherited(self):
        class Manager(Employee):
            @validation_predicate
            def has_reports(self):
                return True

        assert Manager.validation_predicates["contactable"] == "has_contact"
        assert Manager.validation_predicates["has_reports"] == "has_reports"
        assert "has_reports" not in Employee.validation_predicates

    def test_unknown_predicate_raises(self):
        class Orphan(Attributes, Validatable):
            attribute_names = ["a"]
            validations = {"a": {"function": {"name": "nowhere", "message": "x"}}}

        with pytest.raises(UnknownPredicateError) as excinfo:
            Orphan().validate()
        assert isinstance(excinfo.value, ConfigurationError)
        assert "Orphan" in str(excinfo.value)

    def test_validate_is_not_a_predicate(self):
        class SelfReferencing(Attributes, Validatable):
            attribute_names = ["a"]
            validations = {"a": {"function": {"name": "validate", "message": "x"}}}

        with pytest.raises(UnknownPredicateError):
            SelfReferencing().validate()


class TestReadOnlyErrors:
    def test_validation_errors_cannot_be_modified(self, dummy):
        dummy.validate()
        with pytest.raises(TypeError):
            dummy.validation_errors["num1"] = ("injected",)
        with pytest.raises(AttributeError):
            dummy.validation_errors["num2"].append("injected")

    def test_initial_errors_are_read_only(self, dummy):
        with pytest.raises(TypeError):
            dummy.validation_errors["num1"] = ()
