""" Messages exchanged with the node over its control channel. The protocol
    layer has no knowledge of how messages are carried; see
    :mod:`nodeui.transport` for that.
"""

from . import message
from .message import Command, NodeDescriptor, Unknown

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
