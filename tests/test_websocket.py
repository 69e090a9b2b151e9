""" End-to-end tests against a real WebSocket server on the loopback
    interface.
"""

import pytest

import nodeui
from nodeui.transport import websocket
from nodeui.transport.base import TransportConnectionError

from fakenode import wait_for, unused_port


def closed_endpoint():
    return nodeui.config.Endpoint('127.0.0.1', unused_port(), 'SubstratumNode-UI')


def test_socket(node_server):

    socket = websocket.create(node_server.endpoint.url, node_server.endpoint.protocol)
    assert socket.is_open == False

    socket.open()
    assert socket.is_open == True
    assert socket.connection.subprotocol == 'SubstratumNode-UI'

    socket.send('"GetNodeDescriptor"')
    assert socket.recv() == '{"NodeDescriptor": "node-42"}'

    socket.close()
    socket.close()
    assert socket.is_open == False

    # A socket is good for one connection only.

    with pytest.raises(TransportConnectionError):
        socket.open()


def test_socket_refused():

    endpoint = closed_endpoint()
    socket = websocket.create(endpoint.url, endpoint.protocol)

    with pytest.raises(TransportConnectionError):
        socket.open(1)

    assert socket.is_open == False


def test_invalid_url():

    socket = websocket.create('http://127.0.0.1:5333', 'SubstratumNode-UI')

    with pytest.raises(TransportConnectionError):
        socket.open(1)


def test_verify(node_server):

    interface = nodeui.Interface(node_server.endpoint)
    assert interface.verify_node_up(2) == True

    interface = nodeui.Interface(closed_endpoint())
    assert interface.verify_node_down(2) == True
    assert interface.verify_node_up(0.3) == False


def test_session(node_server):

    interface = nodeui.Interface(node_server.endpoint)

    assert interface.connect() == True
    assert interface.is_connected() == True
    assert interface.get_node_descriptor(timeout=5) == 'node-42'

    interface.shutdown()
    assert interface.is_connected() == False
    assert wait_for(lambda: '"ShutdownMessage"' in node_server.received)


def test_connect_refused():

    interface = nodeui.Interface(closed_endpoint())

    with pytest.raises(TransportConnectionError):
        interface.connect()

    assert interface.is_connected() == False


@pytest.mark.parametrize('timeout', (0.0002, 0.0005, 0.001, 0.253))
def test_down_while_up(node_server, timeout):
    """ However small the budget, a node that keeps accepting connections
        is never reported as down.
    """

    for attempt in range(3):
        assert nodeui.verify.node_down(timeout, node_server.endpoint) == False


@pytest.mark.filterwarnings('error::DeprecationWarning')
def test_no_deprecated_usage(node_server):

    socket = websocket.create(node_server.endpoint.url, node_server.endpoint.protocol)
    socket.open()
    socket.send('"GetNodeDescriptor"')
    assert socket.recv() == '{"NodeDescriptor": "node-42"}'
    socket.close()

    interface = nodeui.Interface(node_server.endpoint)
    assert interface.verify_node_up(2) == True

    interface.connect()
    assert interface.get_node_descriptor(timeout=5) == 'node-42'
    interface.disconnect()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
