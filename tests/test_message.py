import nodeui
from nodeui.protocol import message
from nodeui.protocol.message import Command, NodeDescriptor, Unknown


def test_commands():
    """ Commands go out as bare JSON string literals, quotes included. """

    assert Command.GET_NODE_DESCRIPTOR.encode() == '"GetNodeDescriptor"'
    assert Command.SHUTDOWN.encode() == '"ShutdownMessage"'


def test_descriptor():

    response = message.parse('{"NodeDescriptor": "abc123"}')
    assert response == NodeDescriptor('abc123')
    assert response.value == 'abc123'

    # Binary frames are accepted too, and other keys are irrelevant.

    response = message.parse(b'{"NodeDescriptor": "node-42", "extra": 1}')
    assert response == NodeDescriptor('node-42')


def test_unknown():

    for raw in ('{"Other": "abc123"}', '"GetNodeDescriptor"', '[1, 2, 3]', 'null'):
        response = message.parse(raw)
        assert isinstance(response, Unknown)
        assert response.raw == raw

    response = message.parse('{"Other": "abc123"}')
    assert response.decoded == {'Other': 'abc123'}


def test_unusable_descriptor():

    for raw in ('{"NodeDescriptor": ""}', '{"NodeDescriptor": null}', '{"NodeDescriptor": 42}'):
        assert isinstance(message.parse(raw), Unknown)


def test_malformed():

    for raw in ('', '{', 'NodeDescriptor', b'\xff\xfe'):
        response = message.parse(raw)
        assert isinstance(response, Unknown)
        assert response.decoded is None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
