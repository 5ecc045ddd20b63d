from typing import TypedDict


class CatalogEntry(TypedDict):
    kind: str
    args: dict[str, object]


class CatalogDocument(TypedDict, total=False):
    products: list[CatalogEntry]
