from django.apps import AppConfig


class ClientsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.clients"
    label = "clients"

    def ready(self) -> None:
        from modules.clients.events import CLIENT_EVENTS
        from modules.core.handlers import listing_invalidation_handler
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe_many(CLIENT_EVENTS, listing_invalidation_handler)
