from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils.translation import gettext as _
from rest_framework import serializers

from apps.attendance.models import OfficeLocation
from apps.core.api.serializers import SimpleUserSerializer


class SimpleOfficeLocationSerializer(serializers.ModelSerializer):
    class Meta:
        model = OfficeLocation
        fields = ["id", "name", "address", "latitude", "longitude", "radius_m"]
        read_only_fields = fields


class OfficeLocationSerializer(serializers.ModelSerializer):
    """Serializer for OfficeLocation model"""

    created_by = SimpleUserSerializer(read_only=True)
    updated_by = SimpleUserSerializer(read_only=True)

    class Meta:
        model = OfficeLocation
        fields = [
            "id",
            "name",
            "address",
            "latitude",
            "longitude",
            "radius_m",
            "is_active",
            "deactivated_at",
            "description",
            "created_by",
            "updated_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "deactivated_at",
            "created_by",
            "updated_by",
            "created_at",
            "updated_at",
        ]

    def validate_radius_m(self, value):
        """Validate that radius stays within the configured bounds"""
        minimum = settings.ATTENDANCE_OFFICE_RADIUS_MIN_METERS
        maximum = settings.ATTENDANCE_OFFICE_RADIUS_MAX_METERS
        if value < minimum or value > maximum:
            raise serializers.ValidationError(
                _("Radius must be between {minimum} and {maximum} meters").format(minimum=minimum, maximum=maximum)
            )
        return value

    def validate(self, attrs):
        # Reactivating clears the deactivation timestamp
        if attrs.get("is_active") is True:
            attrs["deactivated_at"] = None
        return attrs

    def create(self, validated_data):
        """Create a new OfficeLocation with audit fields"""
        request = self.context.get("request")
        if request and hasattr(request, "user"):
            validated_data["created_by"] = request.user
            validated_data["updated_by"] = request.user

        try:
            return super().create(validated_data)
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.message_dict)

    def update(self, instance, validated_data):
        """Update OfficeLocation with audit fields"""
        request = self.context.get("request")
        if request and hasattr(request, "user"):
            validated_data["updated_by"] = request.user

        if validated_data.get("is_active") is False and instance.is_active:
            validated_data.pop("is_active")
            instance.deactivate(user=validated_data.get("updated_by"))

        try:
            return super().update(instance, validated_data)
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.message_dict)
