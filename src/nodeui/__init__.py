""" Python implementation of the node control channel used by the desktop
    shell. This includes the persistent session with a locally running node,
    liveness checks against it, and the status dispatch layer that sits
    between a graphical front end and the component driving the node.
"""

# Utility components.

from . import json
from . import config

# Submodules used by multiple other components.

from . import protocol
from . import transport
from . import verify

# Primary public-facing interfaces.

from . import dispatch
from .interface import Interface, CallAlreadyInProgress, NotConnected
from .transport import (
    TransportError,
    TransportTimeout,
    TransportConnectionError,
    TransportClosed,
)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
