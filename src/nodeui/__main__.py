""" Command-line access to a node's control channel::

        nodeui up --timeout 10
        nodeui descriptor
        nodeui shutdown
        nodeui down --timeout 10
"""

import argparse
import logging
import sys

from . import config
from .interface import ChannelError, Interface
from .transport.base import TransportError


def parse_arguments(argv=None):

    parser = argparse.ArgumentParser(
        prog='nodeui',
        description='Talk to a locally running node over its control channel.')

    parser.add_argument('--host', default=None,
        help='Host the node listens on (default: %s)' % (config.default_host))
    parser.add_argument('--port', default=None, type=int,
        help='Control channel port (default: %d)' % (config.default_port))
    parser.add_argument('--protocol', default=None,
        help='WebSocket sub-protocol (default: %s)' % (config.default_protocol))
    parser.add_argument('-v', '--verbose', action='store_true',
        help='Log debug information to stderr.')

    commands = parser.add_subparsers(dest='command', required=True)

    up = commands.add_parser('up', help='Wait for the node to accept connections.')
    up.add_argument('--timeout', type=float, default=10.0,
        help='Seconds to wait before giving up (default: %(default)s)')

    down = commands.add_parser('down', help='Wait for the node to stop accepting connections.')
    down.add_argument('--timeout', type=float, default=10.0,
        help='Seconds to wait before giving up (default: %(default)s)')

    commands.add_parser('descriptor', help='Print the node descriptor.')
    commands.add_parser('shutdown', help='Tell the node to shut down.')

    return parser.parse_args(argv)


def main(argv=None):

    arguments = parse_arguments(argv)

    if arguments.verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    endpoint = config.Endpoint(arguments.host, arguments.port, arguments.protocol)
    interface = Interface(endpoint)
    command = arguments.command

    if command == 'up':
        return 0 if interface.verify_node_up(arguments.timeout) else 1

    if command == 'down':
        return 0 if interface.verify_node_down(arguments.timeout) else 1

    try:
        interface.connect()
        if command == 'descriptor':
            try:
                print(interface.get_node_descriptor())
            finally:
                interface.disconnect()
        else:
            interface.shutdown()
    except (TransportError, ChannelError) as e:
        sys.stderr.write('nodeui %s: %s\n' % (command, e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
