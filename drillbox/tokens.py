"""Named tokens that expire after a fixed lifetime and can be renewed."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterator

TIME_TO_LIVE = 60


class TokenExistsError(ValueError):
    """Raised when an active token with the same name already exists."""


class TokenNotFoundError(LookupError):
    """Raised when no active token has the requested name."""


@dataclass
class Token:
    """A token with its creation and expiry times in seconds since the epoch."""

    name: str
    created: float
    expires: float
    renew_count: int = 0

    def is_expired(self, now: float) -> bool:
        return self.expires < now


class TokenRegistry:
    """Keeps tokens in creation order and drops them once they expire."""

    def __init__(self, ttl: float = TIME_TO_LIVE, clock: Callable[[], float] = time.time) -> None:
        self._ttl = ttl
        self._clock = clock
        self._tokens: list[Token] = []

    def generate(self, name: str) -> Token:
        """Create a token; raise TokenExistsError if an active one has this name."""
        now = self._clock()
        stale = False
        for token in self._tokens:
            if token.is_expired(now):
                stale = True
            elif token.name == name:
                raise TokenExistsError(f"token name {name!r} already exists")
        token = Token(name=name, created=now, expires=now + self._ttl)
        self._tokens.append(token)
        if stale:
            self.purge_expired()
        return token

    def renew(self, name: str) -> Token:
        """Extend an active token's expiry by the lifetime and count the renewal."""
        now = self._clock()
        stale = False
        for token in self._tokens:
            if token.is_expired(now):
                stale = True
            elif token.name == name:
                token.expires += self._ttl
                token.renew_count += 1
                return token
        if stale:
            self.purge_expired()
        raise TokenNotFoundError(f"token name {name!r} does not exist")

    def active(self) -> list[Token]:
        """Return the tokens that have not expired, dropping the expired ones."""
        now = self._clock()
        live = [token for token in self._tokens if not token.is_expired(now)]
        self._tokens = list(live)
        return live

    def purge_expired(self) -> int:
        """Remove expired tokens and return how many were removed."""
        now = self._clock()
        before = len(self._tokens)
        self._tokens = [token for token in self._tokens if not token.is_expired(now)]
        return before - len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(list(self._tokens))

    def __len__(self) -> int:
        return len(self._tokens)


def format_token(token: Token) -> str:
    """Render a token's details as printable lines."""
    return (
        f"Token name:{token.name}\n"
        f"created time:{time.ctime(token.created)}\n"
        f"Expiry time :{time.ctime(token.expires)}\n"
        f"Renew count :{token.renew_count}\n"
    )