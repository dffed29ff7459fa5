from django.contrib import admin

from .models import Category, Comment, Post


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "description", "created_at")
    search_fields = ("name",)


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    raw_id_fields = ("user",)


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "author", "category", "is_published", "view_count", "created_at")
    list_filter = ("is_published", "category")
    search_fields = ("title", "content")
    readonly_fields = ("slug", "view_count")
    raw_id_fields = ("author",)
    inlines = [CommentInline]
