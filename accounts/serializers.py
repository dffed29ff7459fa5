from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework.validators import UniqueValidator


User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ("id", "name", "email", "role")
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """Author/commenter reference embedded in posts."""

    class Meta:
        model = User
        fields = ("id", "name", "email")
        read_only_fields = fields


class SignupSerializer(serializers.Serializer):
    name = serializers.CharField(
        min_length=2,
        max_length=50,
        error_messages={
            "required": "Name is required",
            "blank": "Name is required",
            "min_length": "Name must be between 2 and 50 characters",
            "max_length": "Name must be between 2 and 50 characters",
        },
    )
    email = serializers.EmailField(
        error_messages={
            "required": "Email is required",
            "blank": "Email is required",
            "invalid": "Please provide a valid email",
        },
        validators=[
            UniqueValidator(
                queryset=User.objects.all(),
                lookup="iexact",
                message="Email is already registered",
            )
        ],
    )
    password = serializers.CharField(
        min_length=6,
        write_only=True,
        trim_whitespace=False,
        error_messages={
            "required": "Password is required",
            "blank": "Password is required",
            "min_length": "Password must be at least 6 characters",
        },
    )

    def validate_email(self, value):
        return value.lower()

    def create(self, validated_data):
        return User.objects.create_user(
            email=validated_data["email"],
            password=validated_data["password"],
            name=validated_data["name"],
        )


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(
        error_messages={
            "required": "Email is required",
            "blank": "Email is required",
            "invalid": "Please provide a valid email",
        },
    )
    password = serializers.CharField(
        trim_whitespace=False,
        error_messages={"required": "Password is required", "blank": "Password is required"},
    )

    def validate_email(self, value):
        return value.lower()
