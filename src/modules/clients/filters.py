import django_filters
from django.db.models import Q

from modules.clients.models import Client


class ClientFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    phone = django_filters.CharFilter(field_name="phone", lookup_expr="icontains")
    q = django_filters.CharFilter(method="filter_q")

    class Meta:
        model = Client
        fields = ["name", "phone", "q"]

    def filter_q(self, queryset, name, value):
        """Free-text match on name, phone or address."""
        return queryset.filter(
            Q(name__icontains=value)
            | Q(phone__icontains=value)
            | Q(address__icontains=value)
        )
