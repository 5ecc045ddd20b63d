"""YAML catalog loading. Parses a catalog document into CatalogEntry rows."""

from typing import cast

import yaml

from variant_registry.domain.protocols import CatalogGatewayProtocol, FileSystemProtocol
from variant_registry.domain.registry_types import CatalogEntry


class YamlCatalogGateway(CatalogGatewayProtocol):
    """
    Reads catalogs shaped like::

        products:
          - kind: book
            args: {name: Dune, price: 25, author: Herbert}

    Raises ValueError for a document that does not follow that shape.
    """

    def __init__(self, filesystem: FileSystemProtocol) -> None:
        self._fs = filesystem

    def load(self, path: str) -> list[CatalogEntry]:
        content = self._fs.read_text(path)
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ValueError(f"Catalog {path} is not valid YAML: {exc}") from exc
        return YamlCatalogGateway.parse(data, source=path)

    @staticmethod
    def parse(data: object, source: str = "<catalog>") -> list[CatalogEntry]:
        """Validate an already-decoded document and return its entries."""
        if data is None:
            return []
        products = (data.get("products") or []) if isinstance(data, dict) else None
        if not isinstance(products, list):
            raise ValueError(f"Catalog {source} must be a mapping with a 'products' list")

        entries: list[CatalogEntry] = []
        for index, item in enumerate(cast(list[object], products)):
            if not isinstance(item, dict):
                raise ValueError(f"Catalog {source}: entry #{index} is not a mapping")
            kind = item.get("kind")
            if not isinstance(kind, str) or not kind:
                raise ValueError(f"Catalog {source}: entry #{index} has no 'kind'")
            args = item.get("args") or {}
            if not isinstance(args, dict):
                raise ValueError(f"Catalog {source}: entry #{index} 'args' must be a mapping")
            entries.append({"kind": kind, "args": {str(k): v for k, v in args.items()}})
        return entries
