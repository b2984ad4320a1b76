import pytest

from pointbet.core.errors import ValidationError
from pointbet.core.validators import (
    validate_email,
    validate_login_input,
    validate_password,
    validate_profile_update_input,
    validate_register_input,
    validate_username,
)


class TestFieldValidators:

    @pytest.mark.parametrize("email", ["test@example.com", "first.last+tag@sub.example.co"])
    def test_accepts_valid_email(self, email):
        assert validate_email(email) is None

    def test_rejects_missing_email(self):
        assert validate_email("") == "Email is required"
        assert validate_email(None) == "Email is required"

    def test_rejects_long_email(self):
        email = "a" * 95 + "@example.com"
        assert validate_email(email) == "Email is too long (max 100 characters)"

    @pytest.mark.parametrize("email", ["plainaddress", "no-at.example.com", "user@host", "user@.c"])
    def test_rejects_malformed_email(self, email):
        assert validate_email(email) == "Email format is invalid"

    def test_username_length_bounds(self):
        assert validate_username("ab") == "Username must be at least 3 characters"
        assert validate_username("a" * 31) == "Username must be less than 30 characters"
        assert validate_username("abc") is None
        assert validate_username("a" * 30) is None

    def test_username_characters(self):
        assert validate_username("bad name!") == (
            "Username can only contain letters, numbers, and underscores"
        )
        assert validate_username("good_name_42") is None

    def test_password_rules(self):
        assert validate_password(None) == "Password is required"
        assert validate_password("Ab1!") == "Password must be at least 8 characters"
        assert validate_password("alllowercase1!").startswith("Password must include")
        assert validate_password("NoDigits!!").startswith("Password must include")
        assert validate_password("NoSpecial123").startswith("Password must include")
        assert validate_password("Password123!") is None

    def test_password_may_contain_line_breaks(self):
        assert validate_password("Pass\nword123!") is None
        assert validate_password("pass\nword123").startswith("Password must include")


class TestRequestValidators:

    def test_register_collects_every_error(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_register_input("test@example.com", None, None)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Username is required. Password is required"

    def test_register_accepts_valid_input(self):
        validate_register_input("test@example.com", "testuser", "Password123!")

    def test_login_requires_identifier_and_password(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_login_input("", "")
        assert exc_info.value.message == "Email or username is required. Password is required"

    def test_login_checks_email_format_only_for_emails(self):
        validate_login_input("player_one", "Password123!")
        with pytest.raises(ValidationError, match="Email format is invalid"):
            validate_login_input("bad@address", "Password123!")

    def test_login_rejects_short_password(self):
        with pytest.raises(ValidationError, match="at least 8 characters"):
            validate_login_input("test@example.com", "short")

    def test_profile_update_requires_a_field(self):
        with pytest.raises(ValidationError, match="No update data provided"):
            validate_profile_update_input(None, None)

    def test_profile_update_rejects_bad_url(self):
        with pytest.raises(ValidationError, match="Profile image URL must be a valid URL"):
            validate_profile_update_input(None, "not a url")

    def test_profile_update_accepts_valid_fields(self):
        validate_profile_update_input("new_name", "https://cdn.example.com/me.png")
