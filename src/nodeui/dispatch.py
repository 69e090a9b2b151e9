""" The narrow layer between a graphical front end and whatever drives the
    node through its lifecycle. The front end issues one of a fixed set of
    commands and gets back one of a fixed set of status labels; the detail
    of any failure is logged here and never shown beyond the generic
    :data:`INVALID` label.
"""

import logging
from abc import ABC, abstractmethod

log = logging.getLogger(__name__)

OFF = 'Off'
SERVING = 'Serving'
CONSUMING = 'Consuming'
INVALID = 'Invalid'

TURN_OFF = 'turn-off'
SERVE = 'serve'
CONSUME = 'consume'


class Actuator(ABC):
    """ Drives the node from one lifecycle state to another. Each of the
        state changes returns the resulting status label on success, and
        raises on failure. Implementations are responsible for starting and
        stopping the node process; they are expected to use a
        :class:`nodeui.interface.Interface` to confirm the node came up or
        went down, and to ask it to shut down.
    """

    @abstractmethod
    def off(self):
        """ Stop the node. Returns :data:`OFF`. """

    @abstractmethod
    def serving(self, config):
        """ Run the node as a server, using *config*. Returns :data:`SERVING`. """

    @abstractmethod
    def consuming(self, config):
        """ Run the node as a consumer, using *config*. Returns :data:`CONSUMING`. """

    @abstractmethod
    def shutdown(self):
        """ Stop the node in preparation for the front end exiting. """


def change_node_state(actuator, command, config=None):
    """ Invoke the state change on *actuator* corresponding to *command*,
        returning the status label it reports, or :data:`INVALID` if it
        raised. *config* is passed through to :func:`Actuator.serving` and
        :func:`Actuator.consuming`. An unrecognized *command* raises
        ValueError.
    """

    if command == TURN_OFF:
        method = actuator.off
        arguments = ()
    elif command == SERVE:
        method = actuator.serving
        arguments = (config,)
    elif command == CONSUME:
        method = actuator.consuming
        arguments = (config,)
    else:
        raise ValueError('unrecognized node state command: ' + repr(command))

    try:
        status = method(*arguments)
    except Exception:
        log.warning('%s failed', command, exc_info=True)
        return INVALID

    return status


def shutdown(actuator):
    """ Shut down the node via *actuator*. Returns None on success, or the
        reason for the failure as a string, suitable for showing to the
        user alongside advice to stop the node by hand.
    """

    try:
        actuator.shutdown()
    except Exception as e:
        log.warning('could not shut down the node', exc_info=True)
        return str(e)

    return None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
