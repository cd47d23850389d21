"""
Admin authentication.

Admins sign in with a username and password and receive a signed access
token. Requests carrying `Authorization: Bearer <token>` are authenticated
from the token's claims alone; there is no per-request database lookup, so a
token stays valid until it expires even if the admin is deactivated.
"""
# Standard Library
import logging

# Django
from django.contrib.auth.hashers import check_password, identify_hasher, make_password

# Simple JWT
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.tokens import AccessToken

# Local Imports
from .procedures import call_procedure

logger = logging.getLogger(__name__)


class TokenAdmin:
    """The authenticated admin as described by a verified token."""

    is_authenticated = True
    is_anonymous = False

    def __init__(self, id, username, full_name=""):
        self.id = id
        self.pk = id
        self.username = username
        self.full_name = full_name

    def __str__(self):
        return self.username

    def as_dict(self):
        return {"id": self.id, "username": self.username, "full_name": self.full_name}


class AdminJWTAuthentication(JWTAuthentication):
    def get_user(self, validated_token):
        try:
            admin_id = validated_token["id"]
        except KeyError:
            raise InvalidToken("Token contained no recognizable admin identification")
        return TokenAdmin(
            admin_id,
            validated_token.get("username", ""),
            validated_token.get("full_name", ""),
        )


def issue_token(admin):
    token = AccessToken()
    token["id"] = admin.id
    token["username"] = admin.username
    token["full_name"] = admin.full_name
    return str(token)


def hash_password(raw_password):
    return make_password(raw_password)


def is_password_hash(value):
    if not value:
        return False
    try:
        identify_hasher(value)
    except ValueError:
        return False
    return True


def authenticate_admin(username, password):
    """
    Return the active AdminUser matching the credentials, else None.

    Only hashed passwords are ever compared. A row still holding a legacy
    plain-text value never matches; run `manage.py migrate_legacy_passwords`.
    """
    admin = call_procedure("sp_get_admin_by_username", username)
    if admin is None:
        logger.info("Login failed: unknown or inactive admin %r", username)
        return None
    if not is_password_hash(admin.password_hash):
        logger.warning("Login refused for %r: stored password is not hashed", username)
        return None
    if not check_password(password, admin.password_hash):
        logger.info("Login failed: wrong password for %r", username)
        return None
    call_procedure("sp_touch_admin_login", admin.id)
    return admin
