""" Encoding of outbound commands and decoding of inbound responses for the
    node control channel.

    Outbound, every command is a bare JSON string literal; the node does
    not accept any arguments alongside it. Inbound, the node answers with
    JSON objects. The only response the control channel acts upon is the
    node descriptor, identified by the presence of a ``NodeDescriptor`` key;
    anything else is surfaced as :class:`Unknown` so the caller can log and
    discard it.
"""

from __future__ import annotations

import enum
from typing import Any, Union

from .. import json


class Command(enum.Enum):
    """ Commands the desktop shell can issue to the node. """

    GET_NODE_DESCRIPTOR = 'GetNodeDescriptor'
    SHUTDOWN = 'ShutdownMessage'

    def encode(self) -> str:
        """ Return the text frame for this command, which is the command
            name as a quoted JSON string: ``"GetNodeDescriptor"``.
        """
        return json.dumps(self.value).decode()


class NodeDescriptor:
    """ The node's answer to :attr:`Command.GET_NODE_DESCRIPTOR`. """

    key = 'NodeDescriptor'

    def __init__(self, value: str):
        self.value = value

    def __eq__(self, other):
        if isinstance(other, NodeDescriptor):
            return self.value == other.value
        return NotImplemented

    def __repr__(self):
        return 'NodeDescriptor(%r)' % (self.value)


class Unknown:
    """ Any inbound message that is not understood. *raw* is the message
        exactly as it arrived; *decoded* is the parsed JSON, or None if it
        could not be parsed at all.
    """

    def __init__(self, raw, decoded: Any = None):
        self.raw = raw
        self.decoded = decoded

    def __repr__(self):
        return 'Unknown(%r)' % (self.raw)


Response = Union[NodeDescriptor, Unknown]


def parse(raw) -> Response:
    """ Interpret a single inbound message. *raw* may be str or bytes,
        depending on whether it arrived as a text or binary frame. This
        never raises: malformed input is returned as :class:`Unknown`.
    """

    try:
        decoded = json.loads(raw)
    except (json.DecodeError, ValueError, TypeError):
        return Unknown(raw)

    if not isinstance(decoded, dict):
        return Unknown(raw, decoded)

    try:
        value = decoded[NodeDescriptor.key]
    except KeyError:
        return Unknown(raw, decoded)

    # An empty or non-string descriptor is not a usable answer.

    if isinstance(value, str) and value != '':
        return NodeDescriptor(value)

    return Unknown(raw, decoded)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
