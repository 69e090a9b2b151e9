""" Liveness checks for the node, based on repeatedly opening short-lived
    probe connections to its control channel. A probe is never reused: each
    attempt stands up a brand new transport, observes whether it opens, and
    discards it immediately.

    Both checks run against a fixed budget rather than a retry count, so the
    total time spent is bounded regardless of how long an individual
    connection attempt takes. Neither function raises for transport
    problems; every failure to connect is folded into the polling decision.
"""

import logging
import time

from . import config
from .transport import websocket
from .transport.base import TransportError, TransportTimeout

log = logging.getLogger(__name__)


def node_up(timeout, endpoint=None, interval=None, create=None):
    """ Return True as soon as a probe connection to the node opens
        successfully, or False if none did within *timeout* seconds. A
        *timeout* of zero or less returns False without any attempt. Failed
        attempts are retried every *interval* seconds.
    """

    return _poll(timeout, True, endpoint, interval, create)


def node_down(timeout, endpoint=None, interval=None, create=None):
    """ Return True as soon as a probe connection to the node fails to open,
        or False if the node was still accepting connections when *timeout*
        seconds elapsed. A *timeout* of zero or less returns False without
        any attempt. Successful probes are closed and retried every
        *interval* seconds.
    """

    return _poll(timeout, False, endpoint, interval, create)


def probe(endpoint, timeout=None, create=None):
    """ Make one attempt to open and immediately close a connection to
        *endpoint*. Returns True if the connection opened, False if it was
        refused or otherwise failed, and None if the opening handshake did
        not finish within *timeout* seconds. A slow handshake says nothing
        about whether the node is down.
    """

    if create is None:
        create = websocket.create

    if timeout is None:
        timeout = config.open_timeout

    try:
        socket = create(endpoint.url, endpoint.protocol)
        socket.open(timeout)
    except TransportTimeout as e:
        log.debug('probe of %s timed out: %s', endpoint.url, e)
        return None
    except TransportError as e:
        log.debug('probe of %s failed: %s', endpoint.url, e)
        return False

    socket.close()
    return True


def _poll(timeout, want_up, endpoint, interval, create):

    if timeout <= 0:
        return False

    if endpoint is None:
        endpoint = config.Endpoint()

    if interval is None:
        interval = config.interval

    deadline = time.monotonic() + timeout
    attempts = 0

    while True:
        attempts += 1
        opened = probe(endpoint, config.open_timeout, create)

        if opened is want_up:
            log.debug('node at %s is %s after %d probe(s)', endpoint.url,
                      'up' if want_up else 'down', attempts)
            return True

        time.sleep(max(0, min(interval, deadline - time.monotonic())))

        if deadline - time.monotonic() <= 0:
            log.debug('node at %s not confirmed %s after %d probe(s)',
                      endpoint.url, 'up' if want_up else 'down', attempts)
            return False


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
