"""structlog bridge – use any core as a structlog processor."""
from logext.adapters.structlog.processor import CoreProcessor

__all__ = ["CoreProcessor"]
