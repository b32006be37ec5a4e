"""
Sign-in action.

Credential checking is delegated to an identity provider. Rejections the
provider classifies (AuthError) become one of two user-facing messages;
anything else is a system fault and propagates untouched.
"""

import logging
from typing import Any, Mapping, Optional

from django.conf import settings
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.utils.http import url_has_allowed_host_and_scheme

from .. import paths
from .action_result import ActionResult, Message, Navigate

logger = logging.getLogger(__name__)


class AuthError(Exception):
    CREDENTIALS_SIGNIN = "CredentialsSignin"
    ACCESS_DENIED = "AccessDenied"
    CONFIGURATION = "Configuration"

    def __init__(self, type: str, message: str = ""):
        self.type = type
        super().__init__(message or type)


class CredentialsProvider:
    """Checks an email (or username) and password against Django's auth backends."""

    def verify(self, request, credentials: Mapping[str, Any]):
        identifier = (credentials.get("email") or "").strip()
        password = credentials.get("password") or ""
        if not identifier or not password:
            raise AuthError(AuthError.CREDENTIALS_SIGNIN, "Email and password are required")

        User = get_user_model()
        username = identifier
        if "@" in identifier:
            match = User._default_manager.filter(email__iexact=identifier).first()
            if match is not None:
                username = match.get_username()

        user = authenticate(request, username=username, password=password)
        if user is not None:
            return user

        candidate = User._default_manager.filter(**{User.USERNAME_FIELD: username}).first()
        if candidate is not None and not candidate.is_active and candidate.check_password(password):
            raise AuthError(AuthError.ACCESS_DENIED, "Account is disabled")
        raise AuthError(AuthError.CREDENTIALS_SIGNIN, "Credentials do not match")


class AuthService:
    MESSAGES = {
        AuthError.CREDENTIALS_SIGNIN: "Invalid credentials.",
    }
    FALLBACK_MESSAGE = "Something went wrong."

    @classmethod
    def authenticate(cls, request, raw: Mapping[str, Any], provider: Optional[CredentialsProvider] = None) -> ActionResult:
        provider = provider or CredentialsProvider()
        try:
            user = provider.verify(request, raw)
        except AuthError as e:
            logger.info("Sign-in rejected (%s)", e.type)
            return Message(message=cls.MESSAGES.get(e.type, cls.FALLBACK_MESSAGE))

        login(request, user)
        logger.info("User %s signed in", user.pk)
        return Navigate(path=cls.redirect_target(request, raw.get("redirectTo")))

    @staticmethod
    def redirect_target(request, requested: Optional[str]) -> str:
        if requested and url_has_allowed_host_and_scheme(
            requested,
            allowed_hosts={request.get_host()},
            require_https=request.is_secure(),
        ):
            return requested
        return settings.LOGIN_REDIRECT_URL

    @staticmethod
    def sign_out(request) -> Navigate:
        logout(request)
        return Navigate(path=paths.LOGIN)
