"""Field checks shared by the auth endpoints.

The ``validate_<field>`` helpers return an error message or ``None`` so a
caller can collect every problem with a request before rejecting it.
"""

import re
from urllib.parse import urlparse

from pointbet.core.errors import ValidationError

EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
USERNAME_REGEX = re.compile(r"^[a-zA-Z0-9_]{3,30}$")
# 8+ chars with an uppercase letter, a lowercase letter, a digit and a special character
PASSWORD_REGEX = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[^a-zA-Z\d]).{8,}$", re.DOTALL)

EMAIL_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 8


def validate_email(email):
    if not email:
        return "Email is required"
    if len(email) > EMAIL_MAX_LENGTH:
        return "Email is too long (max 100 characters)"
    if not EMAIL_REGEX.match(email.strip()):
        return "Email format is invalid"
    return None


def validate_username(username):
    if not username:
        return "Username is required"
    username = username.strip()
    if len(username) < 3:
        return "Username must be at least 3 characters"
    if len(username) > 30:
        return "Username must be less than 30 characters"
    if not USERNAME_REGEX.match(username):
        return "Username can only contain letters, numbers, and underscores"
    return None


def validate_password(password):
    if not password:
        return "Password is required"
    if len(password) < PASSWORD_MIN_LENGTH:
        return "Password must be at least 8 characters"
    if not PASSWORD_REGEX.match(password):
        return (
            "Password must include at least one uppercase letter, one lowercase letter, "
            "one number, and one special character"
        )
    return None


def validate_url(url):
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return "Profile image URL must be a valid URL"
    return None


def _raise_if_any(errors):
    errors = [e for e in errors if e]
    if errors:
        raise ValidationError(". ".join(errors))


def validate_register_input(email, username, password):
    _raise_if_any([
        validate_email(email),
        validate_username(username),
        validate_password(password),
    ])


def validate_login_input(identifier, password):
    errors = []
    if not identifier:
        errors.append("Email or username is required")
    elif "@" in identifier:
        errors.append(validate_email(identifier))
    if not password:
        errors.append("Password is required")
    elif len(password) < PASSWORD_MIN_LENGTH:
        errors.append("Password must be at least 8 characters")
    _raise_if_any(errors)


def validate_profile_update_input(username, profile_image_url):
    if username is None and profile_image_url is None:
        raise ValidationError("No update data provided")
    errors = []
    if username is not None:
        errors.append(validate_username(username))
    if profile_image_url:
        errors.append(validate_url(profile_image_url))
    _raise_if_any(errors)
