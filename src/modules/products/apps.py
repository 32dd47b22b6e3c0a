from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        from modules.core.handlers import listing_invalidation_handler
        from modules.products.events import PRODUCT_EVENTS
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe_many(PRODUCT_EVENTS, listing_invalidation_handler)
