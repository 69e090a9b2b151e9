import pytest

import nodeui
from fakenode import FakeNode, NodeServer


@pytest.fixture
def node():
    return FakeNode()


@pytest.fixture
def interface(node):
    endpoint = nodeui.config.Endpoint('127.0.0.1', 5333, 'SubstratumNode-UI')
    return nodeui.Interface(endpoint, create=node.create)


@pytest.fixture(scope="session")
def node_server():

    server = NodeServer()

    yield server

    server.stop()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
