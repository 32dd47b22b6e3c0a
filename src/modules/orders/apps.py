from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.orders"
    label = "orders"

    def ready(self) -> None:
        from modules.core.handlers import listing_invalidation_handler
        from modules.orders.events import ORDER_EVENTS
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe_many(ORDER_EVENTS, listing_invalidation_handler)
