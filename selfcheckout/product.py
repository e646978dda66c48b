"""Products and the catalogue of products known to the checkout."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A sellable item identified by its product ID."""

    id: str = ""
    description: str = ""
    price: float = 0.0


_CATALOGUE = (
    Product("Meat01", "T-Bone Steak", 7.99),
    Product("Meat02", "Tyson Fresh Chicken Wings", 10.00),
    Product("Icecream01", "Chocolate Ice Cream", 2.50),
    Product("Icecream02", "Vanilla Ice Cream", 2.50),
    Product("Corn01", "Fresh Sweet Corn", 2.00),
    Product("Casewater01", "24 Bottles Deer Park Water", 4.99),
    Product("Potatochips01", "Plain Potato Chips", 2.00),
    Product("Potatochips02", "Green Onion Potato Chips", 2.00),
    Product("Donuts01", "Glazed Donuts Dozen", 4.99),
    Product("Sausage01", "8-Sausage Pack", 4.99),
    Product("Eggs01", "Dozen Eggs", 3.00),
    Product("Milk01", "Gallon Milk", 4.00),
    Product("Apple01", "One nice crispy Gala apple", 1.00),
)


class ProductDatabase:
    """An in-memory lookup table of products keyed by ID."""

    def __init__(self) -> None:
        self._products: dict[str, Product] = {p.id: p for p in _CATALOGUE}

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def lookup(self, product_id: str) -> Product:
        """Return the product with this ID, or an empty product if unknown."""
        return self._products.get(product_id, Product())