from rest_framework import serializers

from apps.core.models import User


class SimpleUserSerializer(serializers.ModelSerializer):
    """Simple serializer for basic user information"""

    full_name = serializers.CharField(source="get_full_name", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "full_name",
            "employee_code",
            "role",
        ]
        read_only_fields = fields
