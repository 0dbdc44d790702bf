"""Sentry adapter – User.

Passing a :class:`User` under the ``user`` key makes :class:`SentryCore` set
the event's user interface instead of adding it to the extra data.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from logext.adapters.sentry.keys import USER_KEY
from logext.core.encoder import ObjectEncoder
from logext.core.field import Field, obj


@dataclasses.dataclass(frozen=True)
class User:
    id: str = ""
    email: str = ""
    ip_address: str = ""
    username: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in dataclasses.asdict(self).items() if v}

    def marshal_log_object(self, enc: ObjectEncoder) -> None:
        for key, value in self.to_dict().items():
            enc.add(key, value)


def user_field(user: User) -> Field:
    """Turn *user* into a field under the reserved ``user`` key."""
    return obj(USER_KEY, user)


__all__ = ["User", "user_field"]
