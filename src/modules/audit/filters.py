import django_filters

from modules.audit.models import AuditEntry


class AuditEntryFilter(django_filters.FilterSet):
    role = django_filters.CharFilter(field_name="actor_role")
    actor = django_filters.CharFilter(field_name="actor_username")
    affected_id = django_filters.CharFilter(field_name="affected_id")
    start_date = django_filters.DateFilter(field_name="timestamp", lookup_expr="date__gte")
    end_date = django_filters.DateFilter(field_name="timestamp", lookup_expr="date__lte")

    class Meta:
        model = AuditEntry
        fields = ["role", "actor", "affected_id", "start_date", "end_date"]
