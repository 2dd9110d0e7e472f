from rest_framework import serializers  # type: ignore

from .models import Article, Racket


class ArticleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Article
        fields = ["id", "title", "content", "image", "author_id", "created_at", "updated_at"]
        read_only_fields = fields


class ArticleSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Article
        fields = ["id", "title", "created_at", "image"]
        read_only_fields = fields


class RacketSerializer(serializers.ModelSerializer):
    class Meta:
        model = Racket
        fields = ["id", "brand", "model", "price", "weight", "balance", "shape", "description", "image"]
        read_only_fields = fields
