"""
Product list state for the products page.

Keeps the fetched list apart from the filtered view so the search term
can change without losing or re-fetching the source list.
"""
from typing import List, Sequence

from ims_frontend.schemas.product import Product


def filter_products(products: Sequence[Product], term: str) -> List[Product]:
    """Case-insensitive substring match on name or category."""
    needle = term.lower()
    return [
        p for p in products
        if needle in p.name.lower() or needle in p.category.lower()
    ]


class ProductCatalog:

    def __init__(self):
        self._products: List[Product] = []
        self._filtered: List[Product] = []
        self.search_term = ""

    @property
    def products(self) -> List[Product]:
        return list(self._products)

    @property
    def filtered(self) -> List[Product]:
        return list(self._filtered)

    def load(self, products: Sequence[Product]) -> List[Product]:
        self._products = list(products)
        return self.search(self.search_term)

    def search(self, term: str) -> List[Product]:
        self.search_term = term
        self._filtered = filter_products(self._products, term)
        return self.filtered
