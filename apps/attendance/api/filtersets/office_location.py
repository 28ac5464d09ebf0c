import django_filters

from apps.attendance.models import OfficeLocation


class OfficeLocationFilterSet(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    active = django_filters.BooleanFilter(field_name="is_active")

    class Meta:
        model = OfficeLocation
        fields = ["name", "active"]
