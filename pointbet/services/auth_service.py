"""Account registration, login and profile management.

Credentials never touch this service's own storage: sign-up and sign-in go
through the hosted auth server, and the ``users`` row is written by the
``insert_user`` stored procedure.
"""

from postgrest.exceptions import APIError
from supabase import AuthError

from pointbet.core.config import settings
from pointbet.core.errors import AuthenticationError, ServiceError, ValidationError
from pointbet.core.logging import get_logger
from pointbet.core.validators import (
    validate_login_input,
    validate_profile_update_input,
    validate_register_input,
)
from pointbet.services import user_service

logger = get_logger(__name__)

REGISTERED_USER_FIELDS = ("id", "email", "username", "points_balance")
LOGGED_IN_USER_FIELDS = REGISTERED_USER_FIELDS + ("profile_image_url", "is_active")
UPDATED_USER_FIELDS = LOGGED_IN_USER_FIELDS + ("updated_at",)
PROFILE_USER_FIELDS = LOGGED_IN_USER_FIELDS + ("last_login_at", "created_at")

SESSION_FIELDS = ("access_token", "refresh_token", "token_type", "expires_in", "expires_at")


def session_payload(session):
    if session is None:
        return None
    return {field: getattr(session, field, None) for field in SESSION_FIELDS}


def register(db, email, username, password):
    validate_register_input(email, username, password)

    email = email.strip().lower()
    username = username.strip()

    if user_service.username_taken(db, username):
        raise ValidationError("Username already taken")

    try:
        existing = user_service.get_user_by_email(db, email)
    except ServiceError:
        raise ServiceError("Failed to check email availability")
    if existing:
        raise ValidationError("Email already registered")

    try:
        auth = db.auth.sign_up({
            "email": email,
            "password": password,
            "options": {"data": {"username": username}},
        })
    except AuthError as e:
        logger.warning("registration_rejected", email=email, error=e.message)
        raise ValidationError(e.message)

    if not auth.user:
        raise ServiceError("Failed to create user")

    try:
        user = user_service.create_user(
            db,
            auth_id=auth.user.id,
            email=email,
            username=username,
            points_balance=settings.INITIAL_POINTS,
            is_active=True,
        )
    except ServiceError as e:
        logger.error("user_record_creation_failed", auth_id=auth.user.id, error=e.message)
        try:
            db.auth.admin.delete_user(auth.user.id)
        except AuthError as cleanup_error:
            logger.error("auth_user_cleanup_failed", auth_id=auth.user.id, error=cleanup_error.message)
        raise ServiceError("Failed to create user record")

    logger.info("user_registered", user_id=user.get("id"), username=username)
    return {
        "message": "User registered successfully",
        "user": user_service.public_user(user, REGISTERED_USER_FIELDS),
        "session": session_payload(auth.session),
    }


def _resolve_login_email(db, identifier):
    identifier = identifier.strip()
    if "@" in identifier:
        return identifier.lower()

    user = user_service.get_user_by_username(db, identifier)
    if not user:
        raise AuthenticationError("Invalid email or password")
    return user["email"]


def login(db, identifier, password):
    validate_login_input(identifier, password)
    email = _resolve_login_email(db, identifier)

    try:
        auth = db.auth.sign_in_with_password({"email": email, "password": password})
    except AuthError as e:
        logger.warning("login_rejected", email=email, error=e.message)
        raise AuthenticationError("Invalid email or password")

    if not auth.user:
        raise AuthenticationError("Authentication failed")

    try:
        user = user_service.get_user_by_auth_id(db, auth.user.id)
    except ServiceError as e:
        logger.error("user_fetch_failed", auth_id=auth.user.id, error=e.message)
        user = None
    if not user:
        raise ServiceError("Failed to fetch user data")

    try:
        db.table("users").update(
            {"last_login_at": user_service.now_iso()}
        ).eq("auth_id", auth.user.id).execute()
    except APIError as e:
        # last_login_at is best effort
        logger.warning("last_login_update_failed", auth_id=auth.user.id, error=e.message)

    logger.info("user_logged_in", user_id=user.get("id"))
    return {
        "message": "Login successful",
        "user": user_service.public_user(user, LOGGED_IN_USER_FIELDS),
        "session": session_payload(auth.session),
    }


def get_profile(db, auth_user):
    try:
        user = user_service.get_user_by_auth_id(db, auth_user.id)
    except ServiceError as e:
        logger.error("profile_fetch_failed", auth_id=auth_user.id, error=e.message)
        user = None
    if not user:
        raise ServiceError("Failed to fetch user profile")
    return {"user": user_service.public_user(user, PROFILE_USER_FIELDS)}


def update_profile(db, auth_user, username=None, profile_image_url=None):
    validate_profile_update_input(username, profile_image_url)

    changes = {}
    if username is not None:
        changes["username"] = username.strip()
    if profile_image_url is not None:
        changes["profile_image_url"] = profile_image_url or None

    if "username" in changes and user_service.username_taken(
        db, changes["username"], exclude_auth_id=auth_user.id
    ):
        raise ValidationError("Username already taken")

    try:
        user = user_service.update_user(db, auth_user.id, changes)
    except ServiceError as e:
        logger.error("profile_update_failed", auth_id=auth_user.id, error=e.message)
        raise ServiceError("Failed to update user profile")

    logger.info("profile_updated", user_id=user.get("id"), fields=sorted(changes))
    return {
        "message": "Profile updated successfully",
        "user": user_service.public_user(user, UPDATED_USER_FIELDS),
    }


def logout():
    # Tokens are stateless; the client discards its session
    return {"message": "Logged out successfully"}
