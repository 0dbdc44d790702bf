"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── UnknownLevelError
    └── InfrastructureError  (infrastructure.py)
        ├── EncodingError
        └── DeliveryError
"""

from logext.kernel.errors.application import ApplicationError, UnknownLevelError
from logext.kernel.errors.base import BaseError
from logext.kernel.errors.infrastructure import (
    DeliveryError,
    EncodingError,
    InfrastructureError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DeliveryError",
    "EncodingError",
    "InfrastructureError",
    "UnknownLevelError",
]
