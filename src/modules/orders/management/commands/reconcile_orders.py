from django.core.management.base import BaseCommand

from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService


class Command(BaseCommand):
    help = "Recompute remaining amount and payment status of every stored order"

    def handle(self, *args, **options):
        service = OrderService(order_repository=OrderDjangoRepository())
        result = service.reconcile_financial_state()
        self.stdout.write(
            self.style.SUCCESS(
                f"Checked {result.checked} orders, corrected {result.corrected}."
            )
        )
