""" WebSocket transport for the node control channel, built on the threaded
    client from the :mod:`websockets` package. One :class:`Socket` instance
    corresponds to exactly one connection attempt; once closed, or once the
    attempt fails, a new instance is required.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from typing import Optional, Union

from websockets.exceptions import ConnectionClosed, InvalidURI, WebSocketException
from websockets.sync.client import connect

from .. import config
from .base import (
    Transport,
    TransportClosed,
    TransportConnectionError,
    TransportError,
    TransportTimeout,
)

log = logging.getLogger(__name__)


class Socket(Transport):
    """ A single WebSocket connection to *url*, negotiating the sub-protocol
        named by *protocol*. Nothing happens on the network until
        :func:`open` is called.
    """

    def __init__(self, url: str, protocol: str):
        self.url = url
        self.protocol = protocol
        self.connection = None
        self._stack = contextlib.ExitStack()
        self._lock = threading.Lock()
        self._closed = False


    def open(self, timeout: Optional[float] = None) -> None:
        """ Raises :class:`TransportTimeout` if the opening handshake does not
            finish within *timeout* seconds, and
            :class:`TransportConnectionError` for any other failure.
        """

        if timeout is None:
            timeout = config.open_timeout

        if self.connection is not None or self._closed:
            raise TransportConnectionError('socket already used: ' + self.url)

        log.debug('opening %s (%s)', self.url, self.protocol)

        stack = contextlib.ExitStack()

        try:
            connection = stack.enter_context(connect(
                self.url,
                subprotocols=[self.protocol],
                open_timeout=timeout,
                close_timeout=timeout,
            ))
        except InvalidURI as e:
            raise TransportConnectionError('invalid control channel URL: ' + str(e)) from e
        except TimeoutError as e:
            raise TransportTimeout('timed out connecting to %s: %s' % (self.url, e)) from e
        except (OSError, WebSocketException) as e:
            raise TransportConnectionError('cannot connect to %s: %s' % (self.url, e)) from e

        with self._lock:
            if self._closed:
                # close() raced with the opening handshake.
                stack.close()
                raise TransportConnectionError('socket closed while opening: ' + self.url)
            self.connection = connection
            self._stack = stack


    def close(self) -> None:

        with self._lock:
            self._closed = True
            stack = self._stack

        stack.close()


    def send(self, text: str) -> None:

        connection = self.connection
        if connection is None or self._closed:
            raise TransportClosed('socket is not open: ' + self.url)

        try:
            connection.send(text)
        except ConnectionClosed as e:
            raise TransportClosed(str(e)) from e
        except (OSError, WebSocketException) as e:
            raise TransportError(str(e)) from e


    def recv(self) -> Union[str, bytes]:

        connection = self.connection
        if connection is None:
            raise TransportClosed('socket is not open: ' + self.url)

        try:
            return connection.recv()
        except ConnectionClosed as e:
            raise TransportClosed(str(e)) from e
        except (OSError, WebSocketException) as e:
            raise TransportClosed(str(e)) from e


    @property
    def is_open(self) -> bool:
        return self.connection is not None and not self._closed


# end of class Socket



def create(url, protocol):
    """ Factory for a fresh, unopened :class:`Socket`. Everything that opens
        a connection to the node goes through here, which gives tests a
        single seam to substitute their own transport.
    """

    return Socket(url, protocol)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
