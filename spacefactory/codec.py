"""Compact binary encoding of recipe lists.

Integers use a variable-length little-endian form: values below 251 take one
byte; larger values are prefixed by a marker byte (251: u16, 252: u32,
253: u64, 254: u128). Strings and lists are prefixed by their length.
"""

from __future__ import annotations

from typing import Iterable

from spacefactory.item import Item
from spacefactory.recipe import Recipe

_SINGLE_BYTE_LIMIT = 251
_MARKER_WIDTHS = {251: 2, 252: 4, 253: 8, 254: 16}


class DecodeError(ValueError):
    """Raised when encoded recipe data is malformed."""


def _encode_varint(value: int, bits: int) -> bytes:
    if not 0 <= value < 1 << bits:
        raise ValueError(f"value {value} does not fit in an unsigned {bits}-bit integer")
    if value < _SINGLE_BYTE_LIMIT:
        return bytes([value])
    for marker, width in _MARKER_WIDTHS.items():
        if value < 1 << (8 * width):
            return bytes([marker]) + value.to_bytes(width, "little")
    raise ValueError(f"value {value} is too large to encode")


def _encode_str(text: str) -> bytes:
    raw = text.encode("utf-8")
    return _encode_varint(len(raw), 64) + raw


def _encode_item(item: Item) -> bytes:
    return _encode_varint(item.id, 64) + _encode_varint(item.count, 128)


def _encode_items(items: list[Item]) -> bytes:
    return _encode_varint(len(items), 64) + b"".join(_encode_item(i) for i in items)


def _encode_recipe(recipe: Recipe) -> bytes:
    return b"".join(
        (
            _encode_str(recipe.name),
            _encode_items(recipe.input_items),
            _encode_items(recipe.output_items),
            _encode_varint(recipe.power_draw, 32),
            _encode_varint(recipe.heat_produced, 32),
            _encode_varint(recipe.processing_time, 32),
        )
    )


def encode_recipes(recipes: Iterable[Recipe]) -> bytes:
    """Encode ``recipes`` to bytes.

    Raises ValueError if a numeric field is outside its unsigned range.
    """
    recipes = list(recipes)
    return _encode_varint(len(recipes), 64) + b"".join(_encode_recipe(r) for r in recipes)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise DecodeError(
                f"unexpected end of input: needed {size} more byte(s) at offset {self._pos}"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def varint(self, bits: int) -> int:
        first = self.take(1)[0]
        if first < _SINGLE_BYTE_LIMIT:
            return first
        width = _MARKER_WIDTHS.get(first)
        if width is None:
            raise DecodeError(f"invalid integer marker byte {first}")
        if width * 8 > bits:
            raise DecodeError(
                f"invalid integer type: found {width * 8}-bit value where {bits}-bit was expected"
            )
        return int.from_bytes(self.take(width), "little")

    def string(self) -> str:
        raw = self.take(self.varint(64))
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"invalid utf-8 in string: {exc}") from exc

    def item(self) -> Item:
        item_id = self.varint(64)
        count = self.varint(128)
        return Item(id=item_id, count=count)

    def items(self) -> list[Item]:
        return [self.item() for _ in range(self.varint(64))]

    def recipe(self) -> Recipe:
        name = self.string()
        input_items = self.items()
        output_items = self.items()
        return Recipe(
            name=name,
            input_items=input_items,
            output_items=output_items,
            power_draw=self.varint(32),
            heat_produced=self.varint(32),
            processing_time=self.varint(32),
        )


def decode_recipes(data: bytes) -> list[Recipe]:
    """Decode a recipe list from ``data``; trailing bytes are ignored.

    Raises DecodeError if the data is truncated or malformed.
    """
    reader = _Reader(data)
    return [reader.recipe() for _ in range(reader.varint(64))]