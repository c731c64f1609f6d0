import dataclasses

import pytest

import slrpc
from slrpc import session as session_module


def test_session_is_immutable():

    session = slrpc.Session('https://api.example.com', 'u', 'k')

    with pytest.raises(dataclasses.FrozenInstanceError):
        session.debug = True

    assert session.debug is False


def test_repr_hides_api_key():

    session = slrpc.Session('https://api.example.com', 'u', 'very-secret-key')

    assert 'very-secret-key' not in repr(session)
    assert 'very-secret-key' not in str(session)
    assert "username='u'" in repr(session)
    assert session.api_key == 'very-secret-key'


def test_default_transport():

    first = session_module.default_transport()
    second = session_module.default_transport()

    assert isinstance(first, slrpc.XmlRpcTransport)
    assert first is second
    assert first.pool is slrpc.transport.default_pool


def test_service_handle(session, endpoint):

    endpoint.value = [{'id': 1}]

    account = session.service('SoftLayer_Account')
    limited = account.mask('id;hostname').limit(5).offset(10)

    # The original handle is untouched.
    assert account.options == slrpc.Options()

    value = limited.call('getVirtualGuests')
    assert value == [{'id': 1}]

    method, params = endpoint.calls()[0]
    headers = params[0]['headers']

    assert method == 'getVirtualGuests'
    assert str(endpoint.requests[0].url) == 'https://api.example.com/SoftLayer_Account'
    assert headers['SoftLayer_ObjectMask'] == {'mask': 'id;hostname'}
    assert headers['resultLimit'] == {'limit': 5, 'offset': 10}


def test_service_call_arguments(session, endpoint):

    endpoint.value = 42

    guest = session.service('SoftLayer_Virtual_Guest').id(1234)
    value = guest.call('setTags', 'web,prod', result=int)

    assert value == 42

    _method, params = endpoint.calls()[0]
    assert params[0]['headers']['SoftLayer_Virtual_GuestInitParameters'] == {'id': 1234}
    assert params[1] == 'web,prod'


def test_service_filter(session, endpoint):

    service = slrpc.Service(session, 'SoftLayer_Account').filter('{"id": {"operation": 1}}')
    service.call('getObject')

    _method, params = endpoint.calls()[0]
    assert params[0]['headers']['SoftLayer_AccountObjectFilter'] == {'id': {'operation': 1}}


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
