"""Core – entries, fields, levels and the backend contract."""
from logext.core.core import CheckedEntry, Core
from logext.core.encoder import MapObjectEncoder, ObjectEncoder, ObjectMarshaler, marshal
from logext.core.entry import Entry
from logext.core.field import Field, FieldType
from logext.core.level import Level, LevelEnabler, as_enabler
from logext.core.sinks import DiscardingWriteSyncer

__all__ = [
    "CheckedEntry",
    "Core",
    "DiscardingWriteSyncer",
    "Entry",
    "Field",
    "FieldType",
    "Level",
    "LevelEnabler",
    "MapObjectEncoder",
    "ObjectEncoder",
    "ObjectMarshaler",
    "as_enabler",
    "marshal",
]
