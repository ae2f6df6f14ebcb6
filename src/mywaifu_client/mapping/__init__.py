"""Decoding of raw responses into entities, lists and pages."""

from mywaifu_client.mapping.decoder import decode
from mywaifu_client.mapping.shapes import ENTITY_SCHEMAS, DecodeShape, EntityKind, ListOf, Paginated, Single

__all__ = [
    "ENTITY_SCHEMAS",
    "DecodeShape",
    "EntityKind",
    "ListOf",
    "Paginated",
    "Single",
    "decode",
]
