"""Body part catalog and the ordered body model."""

from ..parts import PART_CATALOG, PartAction, PartCatalogEntry, PartCategory
from .errors import BodyError, EmptyBody, IncompatibleBoost, IndexOutOfRange, NotationError, TooManyParts
from .body import Body, BodyPart
from .notation import format_body, parse_body

__all__ = [
    "PART_CATALOG",
    "PartAction",
    "PartCatalogEntry",
    "PartCategory",
    "BodyError",
    "EmptyBody",
    "IncompatibleBoost",
    "IndexOutOfRange",
    "NotationError",
    "TooManyParts",
    "Body",
    "BodyPart",
    "format_body",
    "parse_body",
]
