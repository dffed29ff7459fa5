from rest_framework import serializers

from accounts.serializers import UserSummarySerializer
from .models import Category, Comment, Post


TITLE_LENGTH = "Title must be between 3 and 100 characters"
CATEGORY_NAME_LENGTH = "Category name must be between 2 and 50 characters"


class CategorySerializer(serializers.ModelSerializer):
    # declared explicitly so duplicates reach the view and become a 409
    name = serializers.CharField(
        min_length=2,
        max_length=50,
        error_messages={
            "required": "Category name is required",
            "blank": "Category name is required",
            "min_length": CATEGORY_NAME_LENGTH,
            "max_length": CATEGORY_NAME_LENGTH,
        },
    )
    description = serializers.CharField(
        max_length=200,
        required=False,
        allow_blank=True,
        error_messages={"max_length": "Description cannot exceed 200 characters"},
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Category
        fields = ("id", "name", "description", "createdAt")


class CategorySummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ("id", "name")


class CommentSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)
    content = serializers.CharField(
        max_length=500,
        error_messages={
            "required": "Comment content is required",
            "blank": "Comment content is required",
            "max_length": "Comment must be between 1 and 500 characters",
        },
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Comment
        fields = ("id", "user", "content", "createdAt")


class PostSerializer(serializers.ModelSerializer):
    """Read representation of a post with its references expanded."""

    featuredImage = serializers.CharField(source="featured_image", read_only=True)
    isPublished = serializers.BooleanField(source="is_published", read_only=True)
    viewCount = serializers.IntegerField(source="view_count", read_only=True)
    category = CategorySummarySerializer(read_only=True)
    author = UserSummarySerializer(read_only=True)
    comments = CommentSerializer(many=True, read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Post
        fields = (
            "id",
            "title",
            "slug",
            "content",
            "excerpt",
            "featuredImage",
            "tags",
            "isPublished",
            "viewCount",
            "category",
            "author",
            "comments",
            "createdAt",
            "updatedAt",
        )
        read_only_fields = fields


class PostInputSerializer(serializers.ModelSerializer):
    """Rules for creating a post; used with ``partial=True`` for updates."""

    title = serializers.CharField(
        min_length=3,
        max_length=100,
        error_messages={
            "required": "Title is required",
            "blank": "Title is required",
            "min_length": TITLE_LENGTH,
            "max_length": TITLE_LENGTH,
        },
    )
    content = serializers.CharField(
        min_length=10,
        error_messages={
            "required": "Content is required",
            "blank": "Content is required",
            "min_length": "Content must be at least 10 characters",
        },
    )
    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        error_messages={
            "required": "Category is required",
            "null": "Category is required",
            "does_not_exist": "Invalid category ID",
            "incorrect_type": "Invalid category ID",
        },
    )
    excerpt = serializers.CharField(
        max_length=200,
        required=False,
        allow_blank=True,
        error_messages={"max_length": "Excerpt cannot exceed 200 characters"},
    )
    tags = serializers.ListField(
        child=serializers.CharField(max_length=50),
        required=False,
        error_messages={"not_a_list": "Tags must be an array"},
    )
    featuredImage = serializers.URLField(
        source="featured_image",
        max_length=500,
        required=False,
        allow_blank=True,
        error_messages={"invalid": "Featured image must be a valid URL"},
    )
    isPublished = serializers.BooleanField(
        source="is_published",
        required=False,
        error_messages={"invalid": "isPublished must be a boolean"},
    )

    class Meta:
        model = Post
        fields = ("title", "content", "category", "excerpt", "tags", "featuredImage", "isPublished")

    def validate_tags(self, value):
        # tags behave as a set; keep first-seen order
        return list(dict.fromkeys(value))
