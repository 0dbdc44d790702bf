"""Middleware – cores wrapping other cores."""
from logext.middleware.filtering import FilterFunc, FilteringCore

__all__ = ["FilterFunc", "FilteringCore"]
