from __future__ import annotations

import logging
import math
import re

from django.db import IntegrityError, transaction
from django.db.models import Q
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from config.exceptions import Conflict
from .models import Category, Post
from .serializers import (
    CategorySerializer,
    CommentSerializer,
    PostInputSerializer,
    PostSerializer,
)


logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_ID = 2**63 - 1
_ID_RE = re.compile(r"[0-9]+")


def _positive_int(value, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _is_id(value: str) -> bool:
    return bool(_ID_RE.fullmatch(value)) and 0 < int(value) <= MAX_ID


def _parse_id(value: str) -> int:
    if not _is_id(value):
        raise ValidationError({"id": ["Invalid ID format"]})
    return int(value)


def _posts():
    return Post.objects.select_related("author", "category").prefetch_related("comments__user")


def _get_post_or_404(pk: int) -> Post:
    post = _posts().filter(pk=pk).first()
    if post is None:
        raise NotFound("Post not found")
    return post


def _check_author(request, post: Post, action: str) -> None:
    if post.author_id != request.user.pk:
        logger.info("User %s denied %s on post %s", request.user.pk, action, post.pk)
        raise PermissionDenied(f"Not authorized to {action} this post")


# --- posts -------------------------------------------------------------------

@extend_schema(
    parameters=[
        OpenApiParameter("page", int, required=False),
        OpenApiParameter("limit", int, required=False),
        OpenApiParameter("category", str, required=False, description="Category name"),
    ],
    request=PostInputSerializer,
    responses=PostSerializer,
)
@api_view(["GET", "POST"])
@permission_classes([IsAuthenticatedOrReadOnly])
def post_list(request):
    if request.method == "POST":
        return _create_post(request)

    page = _positive_int(request.query_params.get("page"), DEFAULT_PAGE)
    # TODO: cap limit once clients agree on a maximum page size
    limit = _positive_int(request.query_params.get("limit"), DEFAULT_LIMIT)

    queryset = _posts()
    category_name = request.query_params.get("category")
    if category_name:
        category = Category.objects.filter(name=category_name).first()
        if category is not None:
            queryset = queryset.filter(category=category)

    total = queryset.count()
    offset = (page - 1) * limit
    # out-of-range pages never reach the database as OFFSET/LIMIT
    if offset >= total:
        posts = []
    else:
        posts = queryset[offset:offset + min(limit, total - offset)]

    return Response({
        "success": True,
        "data": {
            "posts": PostSerializer(posts, many=True).data,
            "currentPage": page,
            "totalPages": math.ceil(total / limit),
            "totalPosts": total,
        },
    })


def _create_post(request):
    serializer = PostInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    post = serializer.save(author=request.user)
    logger.info("Post %s created by user %s", post.slug, request.user.pk)
    return Response(
        {"success": True, "message": "Post created successfully", "data": PostSerializer(post).data},
        status=status.HTTP_201_CREATED,
    )


@extend_schema(request=PostInputSerializer, responses=PostSerializer)
@api_view(["GET", "PUT", "PATCH", "DELETE"])
@permission_classes([IsAuthenticatedOrReadOnly])
def post_detail(request, id_or_slug: str):
    if request.method == "GET":
        return _read_post(id_or_slug)

    pk = _parse_id(id_or_slug)

    if request.method == "DELETE":
        post = _get_post_or_404(pk)
        _check_author(request, post, "delete")
        post.delete()
        logger.info("Post %s deleted by user %s", id_or_slug, request.user.pk)
        return Response({"success": True, "message": "Post deleted successfully"})

    serializer = PostInputSerializer(data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    post = _get_post_or_404(pk)
    _check_author(request, post, "update")
    post = serializer.update(post, serializer.validated_data)
    return Response({
        "success": True,
        "message": "Post updated successfully",
        "data": PostSerializer(_get_post_or_404(post.pk)).data,
    })


def _read_post(id_or_slug: str):
    queryset = _posts()
    post = None
    if _is_id(id_or_slug):
        post = queryset.filter(pk=int(id_or_slug)).first()
    if post is None:
        post = queryset.filter(slug=id_or_slug).first()
    if post is None:
        raise NotFound("Post not found")

    post.increment_view_count()
    return Response({"success": True, "data": PostSerializer(post).data})


@extend_schema(request=CommentSerializer, responses=CommentSerializer(many=True))
@api_view(["POST"])
@permission_classes([IsAuthenticated])
def add_comment(request, pk: str):
    pk = _parse_id(pk)
    serializer = CommentSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    post = _get_post_or_404(pk)
    post.add_comment(request.user, serializer.validated_data["content"])

    comments = post.comments.select_related("user")
    return Response({
        "success": True,
        "message": "Comment added successfully",
        "data": {"comments": CommentSerializer(comments, many=True).data},
    })


@extend_schema(
    parameters=[OpenApiParameter("q", str, required=True)],
    responses=PostSerializer(many=True),
)
@api_view(["GET"])
def search_posts(request):
    query = (request.query_params.get("q") or "").strip()
    if not query:
        raise ValidationError({"q": ["Search query is required"]})

    posts = _posts().filter(Q(title__icontains=query) | Q(content__icontains=query))
    data = PostSerializer(posts, many=True).data
    return Response({"success": True, "data": {"posts": data, "count": len(data)}})


# --- categories --------------------------------------------------------------

@extend_schema(request=CategorySerializer, responses=CategorySerializer)
@api_view(["GET", "POST"])
def category_list(request):
    if request.method == "GET":
        data = CategorySerializer(Category.objects.order_by("name"), many=True).data
        return Response({"success": True, "data": {"categories": data, "count": len(data)}})

    serializer = CategorySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    name = serializer.validated_data["name"]
    if Category.objects.filter(name=name).exists():
        raise Conflict("Category already exists")
    try:
        with transaction.atomic():
            category = serializer.save()
    except IntegrityError:
        raise Conflict("Category already exists")

    logger.info("Category %r created", category.name)
    return Response(
        {"success": True, "message": "Category created successfully", "data": CategorySerializer(category).data},
        status=status.HTTP_201_CREATED,
    )
