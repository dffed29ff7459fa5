"""Signed bearer tokens for the JSON API.

A token is ``django.core.signing`` output over ``{"user_id": <pk>}``; it is
verified with the project ``SECRET_KEY`` and expires after
``settings.AUTH_TOKEN_MAX_AGE`` seconds.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core import signing
from rest_framework import authentication, exceptions


logger = logging.getLogger(__name__)

TOKEN_SALT = "accounts.auth-token"
KEYWORD = "Bearer"


def issue_token(user) -> str:
    return signing.dumps({"user_id": user.pk}, salt=TOKEN_SALT)


def resolve_token(token: str):
    try:
        payload = signing.loads(token, salt=TOKEN_SALT, max_age=settings.AUTH_TOKEN_MAX_AGE)
    except signing.BadSignature as exc:
        # SignatureExpired is a BadSignature too
        logger.debug("Rejected token: %s", exc)
        raise exceptions.AuthenticationFailed("Not authorized, token failed")

    User = get_user_model()
    try:
        user = User.objects.get(pk=payload.get("user_id"))
    except (User.DoesNotExist, ValueError, TypeError):
        raise exceptions.AuthenticationFailed("Not authorized, token failed")
    if not user.is_active:
        raise exceptions.AuthenticationFailed("Not authorized, token failed")
    return user


class BearerTokenAuthentication(authentication.BaseAuthentication):
    def authenticate(self, request) -> Optional[Tuple[object, str]]:
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].lower() != KEYWORD.lower().encode():
            return None
        if len(header) != 2:
            raise exceptions.AuthenticationFailed("Not authorized, token failed")
        try:
            token = header[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed("Not authorized, token failed")
        return resolve_token(token), token

    def authenticate_header(self, request) -> str:
        return KEYWORD
