"""Built-in product variants. Immutable value objects that each satisfy Product in full."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from numbers import Real

from variant_registry.domain.protocols import VariantFactory


class VariantKind(Enum):
    """Discriminator keys of the built-in variants."""
    BOOK = "book"
    MOVIE = "movie"
    ALBUM = "album"


class _FieldCheck:
    """Shared field validation for variant __post_init__ hooks."""

    @staticmethod
    def text(field_name: str, value: object) -> None:
        if not isinstance(value, str):
            raise TypeError(
                f"{field_name} must be a string, got {type(value).__name__}")
        if not value.strip():
            raise ValueError(f"{field_name} must not be blank")

    @staticmethod
    def price(value: object) -> None:
        # bool is a Real; a price of True is never intended
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(
                f"price must be a number, got {type(value).__name__}")
        if not math.isfinite(value):
            raise ValueError(f"price must be finite, got {value}")
        if value < 0:
            raise ValueError(f"price must be non-negative, got {value}")


@dataclass(frozen=True)
class Book:
    name: str
    price: float
    author: str

    def __post_init__(self) -> None:
        _FieldCheck.text("name", self.name)
        _FieldCheck.price(self.price)
        _FieldCheck.text("author", self.author)

    def get_name(self) -> str:
        return self.name

    def get_price(self) -> float:
        return self.price


@dataclass(frozen=True)
class Movie:
    name: str
    price: float
    director: str

    def __post_init__(self) -> None:
        _FieldCheck.text("name", self.name)
        _FieldCheck.price(self.price)
        _FieldCheck.text("director", self.director)

    def get_name(self) -> str:
        return self.name

    def get_price(self) -> float:
        return self.price


@dataclass(frozen=True)
class Album:
    name: str
    price: float
    artist: str

    def __post_init__(self) -> None:
        _FieldCheck.text("name", self.name)
        _FieldCheck.price(self.price)
        _FieldCheck.text("artist", self.artist)

    def get_name(self) -> str:
        return self.name

    def get_price(self) -> float:
        return self.price


class VariantFactories:
    """Factories reading construction args into the built-in variants. Missing args raise KeyError."""

    @staticmethod
    def book(args: Mapping[str, object]) -> Book:
        return Book(name=args["name"], price=args["price"], author=args["author"])  # type: ignore[arg-type]

    @staticmethod
    def movie(args: Mapping[str, object]) -> Movie:
        return Movie(name=args["name"], price=args["price"], director=args["director"])  # type: ignore[arg-type]

    @staticmethod
    def album(args: Mapping[str, object]) -> Album:
        return Album(name=args["name"], price=args["price"], artist=args["artist"])  # type: ignore[arg-type]


BUILTIN_FACTORIES: dict[str, VariantFactory] = {
    VariantKind.BOOK.value: VariantFactories.book,
    VariantKind.MOVIE.value: VariantFactories.movie,
    VariantKind.ALBUM.value: VariantFactories.album,
}
