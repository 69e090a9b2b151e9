"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`nodeui.protocol` so the protocol remains
transport-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportTimeout(TransportError):
    """A request did not receive a timely response."""


class TransportConnectionError(TransportError):
    """The transport could not establish a connection."""


class TransportClosed(TransportError):
    """The connection ended while something was still waiting on it."""


class Transport(ABC):
    """Minimal contract for a wire-level transport."""

    @abstractmethod
    def open(self, timeout: Optional[float] = None) -> None:
        """Establish the underlying connection.

        Raises :class:`TransportConnectionError` if the peer cannot be
        reached within *timeout* seconds, or refuses the connection.
        """

    @abstractmethod
    def close(self) -> None:
        """Tear down the underlying connection. Safe to call repeatedly."""

    @abstractmethod
    def send(self, text: str) -> None:
        """Send one message."""

    @abstractmethod
    def recv(self) -> Union[str, bytes]:
        """Block until the next message arrives.

        Raises :class:`TransportClosed` once the connection is gone,
        regardless of which side closed it.
        """

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False
