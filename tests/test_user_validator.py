"""Tests for the pure request validation rules."""

from user_management_api.app.schemas.user import UserCreate, UserUpdate
from user_management_api.app.validators.user_validator import (
    EMAIL_INVALID,
    EMAIL_NOT_TEXT,
    EMAIL_REQUIRED,
    EMAIL_TOO_LONG,
    NAME_LENGTH,
    NAME_NOT_TEXT,
    NAME_REQUIRED,
    PASSWORD_NOT_TEXT,
    PASSWORD_REQUIRED,
    PASSWORD_TOO_SHORT,
    is_valid_email,
    validate_create_request,
    validate_update_request,
)


def messages(errors):
    return {err.field: err.message for err in errors}


def test_valid_create_request_has_no_errors():
    request = UserCreate(email="a@x.com", password="123456", name="Ann")
    assert validate_create_request(request) == []


def test_create_reports_every_bad_field():
    request = UserCreate(email="bad", password="123456", name="A")
    errors = validate_create_request(request)
    assert [err.field for err in errors] == ["email", "name"]
    assert messages(errors) == {"email": EMAIL_INVALID, "name": NAME_LENGTH}
    assert errors[0].rejected_value == "bad"
    assert errors[1].rejected_value == "A"


def test_create_missing_fields_are_required():
    errors = validate_create_request(UserCreate())
    assert messages(errors) == {
        "email": EMAIL_REQUIRED,
        "password": PASSWORD_REQUIRED,
        "name": NAME_REQUIRED,
    }


def test_create_blank_fields_are_required():
    errors = validate_create_request(UserCreate(email="   ", password="  ", name=" "))
    assert messages(errors) == {
        "email": EMAIL_REQUIRED,
        "password": PASSWORD_REQUIRED,
        "name": NAME_REQUIRED,
    }


def test_short_password_is_rejected():
    errors = validate_create_request(UserCreate(email="a@x.com", password="12345", name="Ann"))
    assert messages(errors) == {"password": PASSWORD_TOO_SHORT}


def test_name_length_bounds():
    ok_short = UserCreate(email="a@x.com", password="123456", name="Al")
    ok_long = UserCreate(email="a@x.com", password="123456", name="x" * 50)
    too_long = UserCreate(email="a@x.com", password="123456", name="x" * 51)
    assert validate_create_request(ok_short) == []
    assert validate_create_request(ok_long) == []
    assert messages(validate_create_request(too_long)) == {"name": NAME_LENGTH}


def test_email_length_bound():
    email = "a" * 250 + "@x.com"
    errors = validate_create_request(UserCreate(email=email, password="123456", name="Ann"))
    assert messages(errors) == {"email": EMAIL_TOO_LONG}


def test_email_shapes():
    assert is_valid_email("user@acme.io")
    assert is_valid_email("first.last+tag@mail.acme.org")
    assert not is_valid_email("bad")
    assert not is_valid_email("no@")
    assert not is_valid_email("@acme.io")
    assert not is_valid_email("two@@acme.io")
    assert not is_valid_email("spaces in@acme.io")


def test_empty_update_is_valid():
    assert validate_update_request(UserUpdate()) == []


def test_update_checks_only_present_fields():
    assert validate_update_request(UserUpdate(name="Annie")) == []
    errors = validate_update_request(UserUpdate(email="nope", name="B"))
    assert messages(errors) == {"email": EMAIL_INVALID, "name": NAME_LENGTH}


def test_update_blank_email_is_not_an_address():
    errors = validate_update_request(UserUpdate(email=""))
    assert messages(errors) == {"email": EMAIL_INVALID}


def test_email_library_rejects_malformed_domains():
    assert not is_valid_email("ann@x..com")
    assert not is_valid_email("ann@-x.com")
    assert not is_valid_email("ann@x.com.")


def test_wrong_types_are_reported_with_other_fields():
    request = UserCreate(email=123, password=["123456"], name="A")
    errors = validate_create_request(request)
    assert messages(errors) == {
        "email": EMAIL_NOT_TEXT,
        "password": PASSWORD_NOT_TEXT,
        "name": NAME_LENGTH,
    }
    assert errors[0].rejected_value == 123


def test_update_wrong_type_name():
    errors = validate_update_request(UserUpdate(name=42))
    assert messages(errors) == {"name": NAME_NOT_TEXT}
