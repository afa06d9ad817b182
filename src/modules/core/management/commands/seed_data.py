from __future__ import annotations

import random
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.accounts.models import AccountInfo, AccountRole
from modules.inventory.models import StockRecord
from modules.orders.dtos import AddToCartDTO
from modules.orders.factories import build_cart_service


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        accounts = self._seed_accounts()
        stocks = self._seed_stock()
        cart_lines = self._seed_carts(accounts, stocks)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"accounts={len(accounts)}, "
                f"stocks={len(stocks)}, "
                f"cart_lines={cart_lines}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1
        if not User.objects.filter(username="staff").exists():
            User.objects.create_user("staff", password="staff123", is_staff=True)
            created += 1
        if not User.objects.filter(username="alice").exists():
            User.objects.create_user("alice", password="alice123")
            created += 1
        return created

    def _seed_accounts(self) -> list[AccountInfo]:
        self.stdout.write("Creating accounts...")
        accounts: list[AccountInfo] = []
        seed_accounts = [
            ("admin", AccountRole.ADMIN, "admin@example.com", "Store Admin", "", ""),
            ("staff", AccountRole.STAFF, "staff@example.com", "Sam Staff", "", ""),
            ("alice", AccountRole.CUSTOMER, "alice@example.com", "Alice Reyes",
             "12 Mango St.", "Metro Manila"),
            ("bob", AccountRole.CUSTOMER, "bob@example.com", "Bob Cruz",
             "4 Acacia Ave.", "Cebu"),
            ("carla", AccountRole.CUSTOMER, "", "Carla Diaz",
             "88 Rizal Blvd.", "Davao"),
        ]
        for username, role, email, name, street, region in seed_accounts:
            account, _ = AccountInfo.objects.get_or_create(
                username=username,
                defaults={
                    "role": role,
                    "email": email,
                    "recipient_name": name,
                    "house_street": street,
                    "region": region,
                },
            )
            accounts.append(account)
        self.stdout.write(self.style.SUCCESS("Creating accounts... Done!"))
        return accounts

    def _seed_stock(self) -> list[StockRecord]:
        self.stdout.write("Creating stock records...")
        stocks: list[StockRecord] = []
        catalog = [
            ("TEE-BLK-M", "Basic Tee", "Black", "M", Decimal("299.00")),
            ("TEE-BLK-L", "Basic Tee", "Black", "L", Decimal("299.00")),
            ("TEE-WHT-M", "Basic Tee", "White", "M", Decimal("299.00")),
            ("HOOD-GRY-L", "Zip Hoodie", "Grey", "L", Decimal("899.00")),
            ("HOOD-NVY-XL", "Zip Hoodie", "Navy", "XL", Decimal("899.00")),
            ("JEAN-IND-32", "Slim Jeans", "Indigo", "32", Decimal("1299.00")),
            ("JEAN-BLK-34", "Slim Jeans", "Black", "34", Decimal("1299.00")),
            ("CAP-RED-OS", "Dad Cap", "Red", "OS", Decimal("349.00")),
            ("SOCK-WHT-OS", "Crew Socks", "White", "OS", Decimal("99.00")),
            ("JKT-OLV-M", "Field Jacket", "Olive", "M", Decimal("2499.00")),
        ]
        for product_id, name, color, size, price in catalog:
            stock, _ = StockRecord.objects.get_or_create(
                product_id=product_id,
                defaults={
                    "product_name": name,
                    "color": color,
                    "size": size,
                    "shop_price": price,
                    "quantity": random.randint(5, 120),
                },
            )
            stocks.append(stock)
        self.stdout.write(self.style.SUCCESS("Creating stock records... Done!"))
        return stocks

    def _seed_carts(self, accounts: list[AccountInfo], stocks: list[StockRecord]) -> int:
        self.stdout.write("Filling carts...")
        customers = [a for a in accounts if a.role == AccountRole.CUSTOMER]
        if not customers or not stocks:
            self.stdout.write(self.style.WARNING("Skipping carts (no customers/stock)."))
            return 0

        service = build_cart_service()
        added = 0
        for customer in customers:
            if service.get_cart(customer.username):
                continue
            for stock in random.sample(stocks, k=min(3, len(stocks))):
                service.add_to_cart(
                    AddToCartDTO(username=customer.username, product_id=stock.product_id)
                )
                added += 1
        self.stdout.write(self.style.SUCCESS("Filling carts... Done!"))
        return added
