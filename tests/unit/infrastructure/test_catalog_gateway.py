"""Unit tests for YamlCatalogGateway and FileSystemGateway."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from variant_registry.infrastructure.gateways.catalog_gateway import YamlCatalogGateway
from variant_registry.infrastructure.gateways.filesystem_gateway import FileSystemGateway

SAMPLE = Path(__file__).resolve().parents[3] / "src" / "variant_registry" / "resources" / "sample_catalog.yaml"


def _gateway(content: str) -> YamlCatalogGateway:
    fs = MagicMock()
    fs.read_text.return_value = content
    return YamlCatalogGateway(filesystem=fs)


def test_load_parses_entries():
    gateway = _gateway(
        "products:\n"
        "  - kind: book\n"
        "    args: {name: Dune, price: 25, author: Herbert}\n"
        "  - kind: movie\n"
    )
    entries = gateway.load("catalog.yaml")
    assert entries == [
        {"kind": "book", "args": {"name": "Dune", "price": 25, "author": "Herbert"}},
        {"kind": "movie", "args": {}},
    ]


def test_empty_document_yields_no_entries():
    assert _gateway("").load("empty.yaml") == []
    assert _gateway("products:\n").load("empty.yaml") == []


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("- kind: book\n", "must be a mapping"),
        ("products: book\n", "must be a mapping"),
        ("products:\n  - book\n", "entry #0 is not a mapping"),
        ("products:\n  - args: {}\n", "entry #0 has no 'kind'"),
        ("products:\n  - kind: book\n    args: [1]\n", "'args' must be a mapping"),
        ("products: [unclosed\n", "not valid YAML"),
    ],
)
def test_malformed_documents_rejected(content: str, message: str):
    with pytest.raises(ValueError, match=message):
        _gateway(content).load("bad.yaml")


def test_read_errors_propagate():
    fs = MagicMock()
    fs.read_text.side_effect = FileNotFoundError("missing.yaml")
    with pytest.raises(OSError):
        YamlCatalogGateway(filesystem=fs).load("missing.yaml")


def test_sample_catalog_loads_from_disk():
    entries = YamlCatalogGateway(FileSystemGateway()).load(str(SAMPLE))
    assert [e["kind"] for e in entries] == ["book", "movie", "album"]
    assert entries[0]["args"]["name"] == "Dune"


def test_filesystem_gateway(tmp_path: Path):
    target = tmp_path / "c.yaml"
    target.write_text("products: []\n", encoding="utf-8")
    fs = FileSystemGateway()
    assert fs.exists(str(target))
    assert not fs.exists(str(tmp_path))
    assert fs.read_text(str(target)) == "products: []\n"
    assert fs.resolve_path(str(target)) == str(target.resolve())
