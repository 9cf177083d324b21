"""Contest exercise: stores with stock that can be merged."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Product:
    """A product with its price and the number of items in stock."""

    name: str
    price: int
    count: int


@dataclass
class Store:
    """A store with an owner, a balance and a list of products."""

    owner: str
    balance: int
    products: List[Product] = field(default_factory=list)

    def add_funds(self, amount: int) -> None:
        """Increase the balance by amount."""
        self.balance += amount

    def withdraw_funds(self, amount: int) -> None:
        """Decrease the balance by amount unless that would make it negative."""
        if self.balance - amount >= 0:
            self.balance -= amount

    def merge(self, other: Store, product_name: Optional[str] = None) -> None:
        """Move stock from other into this store.

        Without a product name, every product of this store takes the stock of
        all same-named products of other. With a name, the first product of
        other with that name is moved into this store's products of that name.
        """
        if product_name is None:
            for product in self.products:
                for source in other.products:
                    if source.name == product.name:
                        product.count += source.count
                        source.count = 0
            return

        source = next((item for item in other.products if item.name == product_name), None)
        if source is None:
            return
        for product in self.products:
            if product.name == product_name:
                product.count += source.count
                source.count = 0

    def __str__(self) -> str:
        lines = [f"{self.owner} {self.balance}", "-----"]
        lines += [
            f"{product.name} cost: {product.price} ({product.count} left)"
            for product in self.products
        ]
        lines.append("-----")
        return "".join(f"{line}\n" for line in lines)