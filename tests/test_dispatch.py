import pytest

from nodeui import dispatch


class Actuator(dispatch.Actuator):

    def __init__(self, fail=False):
        self.fail = fail
        self.calls = list()

    def _result(self, name, status):
        self.calls.append(name)
        if self.fail:
            raise RuntimeError(name + ' failed')
        return status

    def off(self):
        return self._result('off', dispatch.OFF)

    def serving(self, config):
        self.config = config
        return self._result('serving', dispatch.SERVING)

    def consuming(self, config):
        self.config = config
        return self._result('consuming', dispatch.CONSUMING)

    def shutdown(self):
        self._result('shutdown', None)


@pytest.mark.parametrize('command,status', (
        ('turn-off', 'Off'),
        ('serve', 'Serving'),
        ('consume', 'Consuming')))
def test_success(command, status):

    actuator = Actuator()
    assert dispatch.change_node_state(actuator, command, ['inconsequential']) == status
    assert len(actuator.calls) == 1


@pytest.mark.parametrize('command', ('turn-off', 'serve', 'consume'))
def test_failure(command):

    actuator = Actuator(fail=True)
    assert dispatch.change_node_state(actuator, command, ['inconsequential']) == 'Invalid'


def test_config_passed_through():

    actuator = Actuator()
    config = {'ip': '1.2.3.4'}

    dispatch.change_node_state(actuator, 'serve', config)
    assert actuator.config is config

    dispatch.change_node_state(actuator, 'consume', config)
    assert actuator.config is config


def test_unknown_command():

    actuator = Actuator()

    with pytest.raises(ValueError):
        dispatch.change_node_state(actuator, 'dance')

    assert actuator.calls == []


def test_shutdown():

    assert dispatch.shutdown(Actuator()) is None
    assert dispatch.shutdown(Actuator(fail=True)) == 'shutdown failed'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
