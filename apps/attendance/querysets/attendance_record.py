from django.db import models


class AttendanceRecordQuerySet(models.QuerySet):
    def for_user(self, user):
        return self.filter(user=user)

    def on_date(self, date):
        return self.filter(date=date)

    def open(self):
        """Records with a check-in but no check-out yet."""
        return self.filter(check_out_at__isnull=True)
