"""Product records, their whitespace-separated text format and an in-memory catalog."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from os import PathLike
from typing import Iterable, Iterator, Optional, Union

MAX_PRODUCTS = 200
NAME_LEN = 64
_MAX_NAME = NAME_LEN - 1

_SPACE = re.compile(r"\s*")
_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WORD = re.compile(rf"\S{{1,{_MAX_NAME}}}")

_FIELDS = ((_INT, int), (_WORD, str), (_FLOAT, float), (_INT, int))


class CatalogFullError(Exception):
    """Raised when a product is added to a catalog that is at capacity."""


class DuplicateCodeError(ValueError):
    """Raised when a product code is already present in the catalog."""

    def __init__(self, code: int) -> None:
        super().__init__(f"a product with code {code} already exists")
        self.code = code


@dataclass
class Product:
    code: int
    name: str
    price: float
    quantity: int


class _Scanner:
    """Reads whitespace-separated fields from text, one conversion at a time."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def exhausted(self) -> bool:
        self._pos = _SPACE.match(self._text, self._pos).end()
        return self._pos >= len(self._text)

    def take(self, pattern: re.Pattern) -> Optional[str]:
        match = pattern.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return match.group()

    def skip_line(self) -> None:
        newline = self._text.find("\n", self._pos)
        self._pos = len(self._text) if newline < 0 else newline + 1


def _scan_record(scanner: _Scanner) -> Optional[list]:
    """Convert up to four fields; None means the input ended before any field."""
    values: list = []
    for pattern, convert in _FIELDS:
        if scanner.exhausted():
            return values or None
        token = scanner.take(pattern)
        if token is None:
            return values
        values.append(convert(token))
    return values


def parse_products(lines: Iterable[str], limit: int = MAX_PRODUCTS) -> list[Product]:
    """Parse records of the form 'code name price quantity'.

    A record with a bad field after the code has the rest of its line skipped;
    a record whose code cannot be read ends the parse.
    """
    text = "".join(line if line.endswith("\n") else line + "\n" for line in lines)
    scanner = _Scanner(text)
    products: list[Product] = []
    while len(products) < limit:
        values = _scan_record(scanner)
        if not values:
            break
        if len(values) < len(_FIELDS):
            scanner.skip_line()
            continue
        code, name, price, quantity = values
        products.append(Product(code, name, price, quantity))
    return products


def load_products(
    path: Union[str, PathLike], limit: int = MAX_PRODUCTS
) -> list[Product]:
    """Read products from a text file; raises OSError if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        return parse_products(handle, limit)


def format_table(products: Iterable[Product]) -> str:
    """Render products as a fixed-width table."""
    products = list(products)
    if not products:
        return "Nenhum produto para mostrar.\n"
    rows = [
        f"{'Código':<6} {'Nome':<20} {'Preço':<10} {'Quantidade':<10}",
        "-" * 59,
    ]
    rows.extend(
        f"{p.code:<6d} {p.name:<20} R$ {p.price:<8.2f} {p.quantity:<10d}"
        for p in products
    )
    return "\n".join(rows) + "\n"


def format_product(product: Product) -> str:
    """Render one product as labelled lines."""
    return (
        f"Código: {product.code}\n"
        f"Nome: {product.name}\n"
        f"Preço: R$ {product.price:.2f}\n"
        f"Quantidade: {product.quantity}\n"
    )


@dataclass
class Catalog:
    """A bounded collection of products kept in insertion order."""

    products: list[Product] = field(default_factory=list)
    capacity: int = MAX_PRODUCTS

    def __post_init__(self) -> None:
        self.products = list(self.products)
        if len(self.products) > self.capacity:
            raise CatalogFullError(
                f"{len(self.products)} products exceed capacity {self.capacity}"
            )

    def __len__(self) -> int:
        return len(self.products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    @property
    def is_full(self) -> bool:
        return len(self.products) >= self.capacity

    def add(self, product: Product) -> Product:
        """Append a product, truncating its name; returns the stored product."""
        if self.is_full:
            raise CatalogFullError(f"catalog capacity {self.capacity} reached")
        if self.find(product.code) is not None:
            raise DuplicateCodeError(product.code)
        stored = replace(product, name=product.name[:_MAX_NAME])
        self.products.append(stored)
        return stored

    def find(self, code: int) -> Optional[Product]:
        """Return the first product with the given code, or None."""
        return next((p for p in self.products if p.code == code), None)

    def sort_by_price(self) -> None:
        """Sort the products by ascending price."""
        self.products.sort(key=lambda p: p.price)