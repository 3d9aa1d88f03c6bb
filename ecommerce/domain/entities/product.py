"""Product aggregate."""
from dataclasses import dataclass

from ..value_objects import Money, ProductId


@dataclass
class Product:
    """Catalogue product with its current price."""
    id: ProductId
    name: str
    price: Money

    @classmethod
    def create(cls, name: str, price: Money) -> "Product":
        """Factory method to catalogue a new product with a fresh id."""
        return cls(id=ProductId.generate(), name=name, price=price)

    def change_price(self, price: Money) -> None:
        """Replace the current price. Existing orders keep their captured price."""
        self.price = price
