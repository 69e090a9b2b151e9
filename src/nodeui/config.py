""" Location of the node's control channel, and the timing constants used
    when talking to it. The defaults match what the node listens on; the
    ``NODEUI_HOST``, ``NODEUI_PORT``, and ``NODEUI_PROTOCOL`` environment
    variables override them for any :class:`Endpoint` constructed after
    they are set.
"""

import os

default_host = '127.0.0.1'
default_port = 5333
default_protocol = 'SubstratumNode-UI'

# Seconds between liveness probes.
interval = 0.25

# Upper bound, in seconds, on any single opening handshake.
open_timeout = 5.0


class Endpoint:
    """ The *host*, *port*, and WebSocket sub-*protocol* identifying the
        control channel of a single node. Any argument left as None is
        taken from the environment, or the module default if the environment
        does not specify one.
    """

    def __init__(self, host=None, port=None, protocol=None):

        if host is None:
            host = os.environ.get('NODEUI_HOST', default_host)

        if port is None:
            port = os.environ.get('NODEUI_PORT', default_port)

        if protocol is None:
            protocol = os.environ.get('NODEUI_PROTOCOL', default_protocol)

        try:
            port = int(port)
        except ValueError:
            raise ValueError('invalid port number: ' + repr(port))

        self.host = host
        self.port = port
        self.protocol = protocol


    def __eq__(self, other):
        try:
            return self.url == other.url and self.protocol == other.protocol
        except AttributeError:
            return NotImplemented


    def __repr__(self):
        return 'Endpoint(%r, %d, %r)' % (self.host, self.port, self.protocol)


    @property
    def url(self):
        return 'ws://%s:%d' % (self.host, self.port)


# end of class Endpoint


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
