from django.contrib import admin

from .models import AttendanceRecord, OfficeLocation


@admin.register(OfficeLocation)
class OfficeLocationAdmin(admin.ModelAdmin):
    list_display = ["name", "latitude", "longitude", "radius_m", "is_active", "updated_at"]
    list_filter = ["is_active"]
    search_fields = ["name", "address"]
    readonly_fields = ["deactivated_at", "created_by", "updated_by", "created_at", "updated_at"]
    actions = ["deactivate_selected"]

    @admin.action(description="Deactivate selected office locations")
    def deactivate_selected(self, request, queryset):
        for location in queryset.active():
            location.deactivate(user=request.user)

    def has_delete_permission(self, request, obj=None):
        return False

    def save_model(self, request, obj, form, change):
        if not change:
            obj.created_by = request.user
        obj.updated_by = request.user
        super().save_model(request, obj, form, change)


@admin.register(AttendanceRecord)
class AttendanceRecordAdmin(admin.ModelAdmin):
    list_display = ["user", "date", "check_in_at", "check_out_at", "work_hours", "status", "check_in_office"]
    list_filter = ["status", "date", "check_in_office"]
    search_fields = ["user__username", "user__email", "user__employee_code"]
    date_hierarchy = "date"

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
