# domain/actor.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

U = TypeVar("U")


class UserType(str, Enum):
    ANONYMOUS = "anonymous"
    SIGNED_IN = "signedIn"


@dataclass(frozen=True)
class Actor(Generic[U]):
    """
    ユースケースを実行する主体

    user_type は user から導出する（保持しない）
    """
    user: Optional[U] = None

    @property
    def user_type(self) -> UserType:
        if self.user is None:
            return UserType.ANONYMOUS
        return UserType.SIGNED_IN

    @classmethod
    def anonymous(cls) -> "Actor[U]":
        return cls(user=None)

    @classmethod
    def signed_in(cls, user: U) -> "Actor[U]":
        return cls(user=user)
