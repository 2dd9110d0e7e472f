from django.contrib import admin

from .models import Article, Racket


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    list_display = ("title", "author_id", "created_at")
    search_fields = ("title", "content")


@admin.register(Racket)
class RacketAdmin(admin.ModelAdmin):
    list_display = ("brand", "model", "price", "weight", "balance", "shape")
    list_filter = ("brand", "balance", "shape")
    search_fields = ("brand", "model")
