"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from artmarket.infrastructure.config import Settings
from artmarket.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from artmarket.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)
from artmarket.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from artmarket.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

_settings: Settings | None = None


def settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def use_settings(new_settings: Settings) -> None:
    global _settings
    _settings = new_settings


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def inventory_repository() -> JsonInventoryRepository:
    return JsonInventoryRepository(settings().data_dir / "inventory.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(settings().data_dir / "carts.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")
