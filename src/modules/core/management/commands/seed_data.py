from __future__ import annotations

import random
from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.utils import timezone

from modules.clients.models import Client
from modules.core.cache import listing_cache
from modules.orders.constants import OrderStatus
from modules.orders.models import Order
from modules.products.models import Product


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def add_arguments(self, parser):
        parser.add_argument("--orders", type=int, default=40)

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        clients = self._seed_clients()
        products = self._seed_products()
        orders_created = self._seed_orders(clients, products, options["orders"])

        for entity_type in ("clients", "products", "orders"):
            listing_cache.invalidate(entity_type)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"clients={len(clients)}, "
                f"products={len(products)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1
        if not User.objects.filter(username="balcao").exists():
            User.objects.create_user("balcao", password="balcao123")
            created += 1
        return created

    def _seed_clients(self) -> list[Client]:
        self.stdout.write("Creating clients...")
        clients: list[Client] = []
        seed_clients = [
            ("Ana Souza", "(11) 98765-4321", "Rua das Flores, 120 - São Paulo"),
            ("Padaria Pão Quente", "(11) 3344-5566", "Av. Brasil, 455 - Santo André"),
            ("Carla Mendes", "(21) 99876-1234", "Rua do Catete, 88 - Rio de Janeiro"),
            ("Escola Aprender", "(11) 2233-4455", "Rua Vergueiro, 1500 - São Paulo"),
            ("Eduardo Alves", "", ""),
            ("Mercado Bom Preço", "(19) 3232-1010", "Av. Norte-Sul, 300 - Campinas"),
            ("Gabriel Santos", "(11) 97777-8888", ""),
            ("Clínica Sorriso", "(11) 3030-4040", "Rua Augusta, 901 - São Paulo"),
        ]
        for name, phone, address in seed_clients:
            client, _ = Client.objects.get_or_create(
                name=name,
                defaults={"phone": phone, "address": address},
            )
            clients.append(client)
        self.stdout.write(self.style.SUCCESS("Creating clients... Done!"))
        return clients

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ("Cartão de Visita (1000 un.)", Decimal("89.90")),
            ("Panfleto A5 (500 un.)", Decimal("120.00")),
            ("Banner 90x120 cm", Decimal("75.00")),
            ("Adesivo Vinil (m²)", Decimal("45.00")),
            ("Convite de Casamento (100 un.)", Decimal("350.00")),
            ("Cardápio Plastificado", Decimal("18.50")),
            ("Caneca Personalizada", Decimal("32.00")),
            ("Camiseta Estampada", Decimal("49.90")),
            ("Bloco de Notas A6", Decimal("12.00")),
            ("Placa PVC 40x60 cm", Decimal("65.00")),
        ]
        for name, price in catalog:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={"price": price},
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_orders(
        self, clients: list[Client], products: list[Product], count: int
    ) -> int:
        self.stdout.write("Creating orders...")
        if not clients or not products:
            self.stdout.write(self.style.WARNING("Skipping orders (no clients/products)."))
            return 0
        if Order.objects.exists():
            self.stdout.write(self.style.WARNING("Orders already seeded, skipping."))
            return 0

        status_weights = [
            (OrderStatus.IN_PRODUCTION, 0.45),
            (OrderStatus.COMPLETED, 0.45),
            (OrderStatus.CANCELED, 0.10),
        ]
        statuses = [s for s, _ in status_weights]
        weights = [w for _, w in status_weights]
        today = timezone.localdate()

        for _ in range(count):
            product = random.choice(products)
            quantity = random.randint(1, 5)
            total = product.price * quantity
            # Unpaid, half paid or settled.
            amount_paid = random.choice(
                [Decimal("0.00"), (total / 2).quantize(Decimal("0.01")), total]
            )
            # Financial fields are derived by Order.save().
            Order.objects.create(
                client=random.choice(clients),
                product=product,
                quantity=quantity,
                order_date=today - timedelta(days=random.randint(0, 60)),
                status=random.choices(statuses, weights=weights, k=1)[0],
                total=total,
                amount_paid=amount_paid,
            )

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return count
