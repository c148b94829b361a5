"""
Unit tests for app.application.validation
"""
import pytest

from app.application.validation import EMPTY_PATCH_ISSUE, validate_create, validate_update
from app.domain.models.user import UNSET, User, UserPatch
from app.domain.result import Err, FailureKind, Ok, ValidationIssue


class TestValidateCreate:
    """Tests for validate_create"""

    def test_valid_payload(self):
        result = validate_create({"email": "a@b.co", "password": "x"})
        assert isinstance(result, Ok)
        assert result.value.email == "a@b.co"
        assert result.value.password == "x"

    def test_missing_body_reports_every_field(self):
        result = validate_create(None)
        assert isinstance(result, Err)
        assert result.failure.kind is FailureKind.VALIDATION
        assert [issue.path for issue in result.failure.issues] == [("email",), ("password",)]

    def test_invalid_email(self):
        result = validate_create({"email": "nope", "password": "x"})
        assert isinstance(result, Err)
        assert result.failure.issues == (ValidationIssue(path=("email",), message="Invalid email"),)


    def test_email_kept_verbatim(self):
        result = validate_create({"email": "Mixed@Example.COM", "password": "x"})
        assert result.value.email == "Mixed@Example.COM"

    @pytest.mark.parametrize(
        "email", ["dev@box.local", "first.last+tag@sub.example.org", "o'brien@example.ie"]
    )
    def test_accepts_email_shapes(self, email):
        assert isinstance(validate_create({"email": email, "password": "x"}), Ok)

    @pytest.mark.parametrize(
        "email", ["", "invalidemail", "a@b", ".a@b.co", "a..b@b.co", "a@b.c", "a b@b.co"]
    )
    def test_rejects_malformed_emails(self, email):
        result = validate_create({"email": email, "password": "x"})
        assert isinstance(result, Err)
        assert result.failure.issues == (ValidationIssue(path=("email",), message="Invalid email"),)


class TestValidateUpdate:
    """Tests for validate_update"""

    def test_email_only(self):
        result = validate_update({"email": "new@example.com"})
        assert isinstance(result, Ok)
        assert result.value == UserPatch(email="new@example.com")
        assert result.value.password is UNSET

    def test_password_only(self):
        result = validate_update({"password": "secret"})
        assert isinstance(result, Ok)
        assert result.value.email is UNSET
        assert result.value.password == "secret"

    def test_empty_body_rejected(self):
        for payload in ({}, None, {"password": ""}):
            result = validate_update(payload)
            assert isinstance(result, Err), payload
            assert result.failure.issues == (EMPTY_PATCH_ISSUE,)

    def test_explicit_null_is_a_type_error(self):
        result = validate_update({"email": None})
        assert isinstance(result, Err)
        assert result.failure.issues == (
            ValidationIssue(path=("email",), message="Expected string, received null"),
        )

    def test_invalid_email_rejected_before_emptiness(self):
        result = validate_update({"email": "invalidemail"})
        assert isinstance(result, Err)
        assert result.failure.issues == (ValidationIssue(path=("email",), message="Invalid email"),)


class TestUserPatch:
    """Tests for UserPatch"""

    def test_default_patch_is_empty(self):
        assert UserPatch().is_empty()

    def test_patch_with_field_is_not_empty(self):
        assert not UserPatch(password="hash").is_empty()

    def test_unset_is_falsy_singleton(self):
        assert not UNSET
        assert repr(UNSET) == "UNSET"
        assert type(UNSET)() is UNSET


class TestUserModel:
    """Tests for User business validations"""

    def test_new_user_requires_email_shape(self):
        with pytest.raises(ValueError):
            User(id=None, email="legacy-user", hashed_password="$2b$hash")

    def test_stored_user_loads_as_is(self):
        user = User(id="5f7b1f5f782d0b1d9c9c0a5a", email="legacy-user")
        assert user.email == "legacy-user"
