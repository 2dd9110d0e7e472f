from rest_framework import serializers  # type: ignore

from .models import Tournament


class TournamentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Tournament
        fields = [
            "id",
            "name",
            "description",
            "category",
            "status",
            "start_date",
            "end_date",
            "max_teams",
            "entry_fee",
            "prize",
            "created_at",
        ]
        read_only_fields = fields
