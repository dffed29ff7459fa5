import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import AuthenticationFailed, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .authentication import issue_token
from .serializers import LoginSerializer, SignupSerializer, UserSerializer


logger = logging.getLogger(__name__)
User = get_user_model()


def _auth_payload(user):
    return {"user": UserSerializer(user).data, "token": issue_token(user)}


@extend_schema(request=SignupSerializer)
@api_view(["POST"])
def signup(request):
    serializer = SignupSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    try:
        with transaction.atomic():
            user = serializer.save()
    except IntegrityError:
        # registered concurrently after the uniqueness check
        raise ValidationError({"email": ["Email is already registered"]})
    logger.info("New user registered: %s", user.email)
    return Response(
        {"success": True, "message": "User registered successfully", "data": _auth_payload(user)},
        status=status.HTTP_201_CREATED,
    )


@extend_schema(request=LoginSerializer)
@api_view(["POST"])
def login(request):
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    email = serializer.validated_data["email"]
    password = serializer.validated_data["password"]

    user = User.objects.filter(email=email).first()
    if user is None or not user.is_active or not user.check_password(password):
        logger.info("Failed login for %s", email)
        raise AuthenticationFailed("Invalid email or password")

    return Response({"success": True, "message": "Login successful", "data": _auth_payload(user)})


@extend_schema(responses=UserSerializer)
@api_view(["GET"])
@permission_classes([IsAuthenticated])
def me(request):
    return Response({"success": True, "data": UserSerializer(request.user).data})
