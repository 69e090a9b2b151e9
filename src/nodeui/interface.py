""" The control channel between the desktop shell and a locally running
    node. An :class:`Interface` holds at most one persistent session with
    the node, over which it can ask for the node's descriptor or tell the
    node to shut down; it can also check whether the node is up or down
    without touching that session.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from . import config
from . import verify
from .protocol.message import Command, NodeDescriptor, parse
from .transport import websocket
from .transport.base import (
    TransportClosed,
    TransportConnectionError,
    TransportError,
    TransportTimeout,
)

log = logging.getLogger(__name__)


class ChannelError(Exception):
    """Base class for misuse of the control channel."""


class CallAlreadyInProgress(ChannelError):
    """A descriptor request is already outstanding."""

    def __init__(self, message='CallAlreadyInProgress'):
        super().__init__(message)


class NotConnected(ChannelError):
    """The operation requires a session, and none is held."""


class PendingDescriptor:
    """ The one outstanding request for the node descriptor. The caller
        blocks in :func:`wait` until the reader thread, or a session
        teardown, completes it one way or the other.
    """

    def __init__(self):
        self.descriptor: Optional[str] = None
        self.error: Optional[BaseException] = None
        self.event = threading.Event()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self.event.wait(timeout)

    def _complete(self, descriptor: str) -> None:
        self.descriptor = descriptor
        self.event.set()

    def _fail(self, error: BaseException) -> None:
        self.error = error
        self.event.set()


class Session:
    """ An open connection to the node, plus the background thread that
        reads everything the node sends. Inbound messages and the eventual
        end of the connection are both reported back to *interface*.
    """

    join_timeout = 2.0

    def __init__(self, interface: Interface, socket):
        self.interface = interface
        self.socket = socket
        self.thread = threading.Thread(target=self.run, name='nodeui.Session')
        self.thread.daemon = True

    def start(self) -> None:
        self.thread.start()

    def send(self, command: Command) -> None:
        self.socket.send(command.encode())

    def close(self) -> None:
        """ Close the connection, and wait up to :attr:`join_timeout` seconds
            for the reader thread to notice and exit.
        """

        self.socket.close()

        if self.thread.ident is None or self.thread is threading.current_thread():
            return

        self.thread.join(self.join_timeout)

    def run(self) -> None:

        while True:
            try:
                raw = self.socket.recv()
            except TransportError as e:
                self.interface._session_lost(self, e)
                return

            self.interface._handle_incoming(raw)


class Interface:
    """ Client side of the node control channel. The *endpoint* is a
        :class:`nodeui.config.Endpoint`; if not specified, the default
        endpoint (subject to environment overrides) is used. *create* is the
        factory for new transports, and defaults to
        :func:`nodeui.transport.websocket.create`.

        Calling :func:`connect` while a session is already held replaces
        that session: the old one is closed first, failing any outstanding
        descriptor request, and then a new connection is attempted.
    """

    def __init__(self, endpoint=None, create=None):

        if endpoint is None:
            endpoint = config.Endpoint()

        if create is None:
            create = websocket.create

        self.endpoint = endpoint
        self.create = create
        self.session: Optional[Session] = None
        self.pending: Optional[PendingDescriptor] = None
        self.lock = threading.Lock()


    def connect(self) -> bool:
        """ Open a new session with the node. Returns True once the session
            is established; raises :class:`TransportConnectionError` if the
            connection could not be opened, in which case any outstanding
            descriptor request fails with the same error. There are no
            retries here; see :func:`verify_node_up` for that.
        """

        previous = self._detach()
        if previous is not None:
            log.debug('replacing existing session with %s', self.endpoint.url)
            previous.close()
            self._fail_pending(TransportClosed('session replaced'))

        try:
            socket = self.create(self.endpoint.url, self.endpoint.protocol)
            socket.open()
        except TransportConnectionError as e:
            self._fail_pending(e)
            raise
        except TransportError as e:
            error = TransportConnectionError(str(e))
            self._fail_pending(error)
            raise error from e

        session = Session(self, socket)

        with self.lock:
            self.session = session

        session.start()
        log.debug('connected to %s', self.endpoint.url)
        return True


    def disconnect(self) -> None:
        """ Close the session, if any, without telling the node anything.
            An outstanding descriptor request fails with
            :class:`TransportClosed`. The session's reader thread has exited
            by the time this returns, unless it is stuck for longer than
            :attr:`Session.join_timeout`.
        """

        session = self._detach()
        if session is None:
            return

        session.close()
        self._fail_pending(TransportClosed('disconnected'))


    def is_connected(self) -> bool:
        return self.session is not None


    def verify_node_up(self, timeout) -> bool:
        """ See :func:`nodeui.verify.node_up`. *timeout* is in seconds. """
        return verify.node_up(timeout, self.endpoint, create=self.create)


    def verify_node_down(self, timeout) -> bool:
        """ See :func:`nodeui.verify.node_down`. *timeout* is in seconds. """
        return verify.node_down(timeout, self.endpoint, create=self.create)


    def get_node_descriptor(self, timeout=None) -> str:
        """ Ask the node for its descriptor and block until it answers.
            Only one such request may be outstanding at a time; a second
            caller gets :class:`CallAlreadyInProgress` immediately, and
            nothing is sent on its behalf.

            There is no timeout by default: the request ends when the node
            answers, or when the session fails. If *timeout* seconds are
            specified and elapse first, :class:`TransportTimeout` is raised.
        """

        pending = PendingDescriptor()

        with self.lock:
            session = self.session
            if session is None:
                raise NotConnected('no session with the node')

            if self.pending is not None:
                raise CallAlreadyInProgress()

            self.pending = pending

        try:
            session.send(Command.GET_NODE_DESCRIPTOR)
        except TransportError as e:
            self._fail_pending(e, pending)
            raise

        completed = pending.wait(timeout)

        if completed == False:
            self._fail_pending(TransportTimeout('no node descriptor received in %.2f sec' % (timeout)), pending)

            # If the descriptor arrived at the same moment, whoever took the
            # request out of the slot is about to complete it.
            pending.wait()

        if pending.error is not None:
            raise pending.error

        return pending.descriptor


    def shutdown(self) -> None:
        """ Tell the node to shut down, and close the session. The node
            does not acknowledge the command, and nothing waits for it to
            comply; use :func:`verify_node_down` to confirm it stopped.
        """

        session = self._detach()
        if session is None:
            raise NotConnected('no session with the node')

        try:
            session.send(Command.SHUTDOWN)
        finally:
            session.close()
            self._fail_pending(TransportClosed('session shut down'))


    def _detach(self) -> Optional[Session]:
        """ Forget the current session, returning it. """

        with self.lock:
            session = self.session
            self.session = None

        return session


    def _fail_pending(self, error, pending=None) -> None:
        """ Fail the outstanding descriptor request, if any. If *pending* is
            specified, only that specific request is failed.
        """

        with self.lock:
            current = self.pending
            if current is None:
                return
            if pending is not None and current is not pending:
                return
            self.pending = None

        current._fail(error)


    def _handle_incoming(self, raw) -> None:

        response = parse(raw)

        if not isinstance(response, NodeDescriptor):
            log.debug('ignoring message from node: %r', raw)
            return

        with self.lock:
            pending = self.pending
            self.pending = None

        if pending is None:
            log.debug('unsolicited node descriptor: %r', response.value)
            return

        pending._complete(response.value)


    def _session_lost(self, session, error) -> None:
        """ Called from the reader thread when *session* ends. If it is no
            longer the current session this was expected, and nothing else
            needs to happen.
        """

        with self.lock:
            if self.session is not session:
                return
            self.session = None

        log.debug('session with %s lost: %s', self.endpoint.url, error)
        session.close()
        self._fail_pending(TransportClosed(str(error)))


# end of class Interface


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
