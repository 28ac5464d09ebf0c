from apps.attendance.models import OfficeLocation


def list_active() -> list[OfficeLocation]:
    """Return every currently active office location.

    Read fresh on each call. Ordered by primary key so that geofence
    tie-breaks are stable between calls.
    """
    return list(OfficeLocation.objects.active().order_by("id"))
