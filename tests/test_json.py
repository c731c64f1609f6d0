import pytest

import slrpc


def test_loads_filter_text():

    text = '{"virtualGuests": {"hostname": {"operation": "web1"}, "id": {"operation": 5}}}'
    decoded = slrpc.json.loads(text)

    assert isinstance(decoded, dict)
    assert decoded['virtualGuests']['hostname'] == {'operation': 'web1'}
    assert decoded['virtualGuests']['id'] == {'operation': 5}


def test_loads_bytes():

    decoded = slrpc.json.loads(b'{"list": [1, 2, null, true]}')
    assert decoded == {'list': [1, 2, None, True]}


def test_malformed_text():

    # Whichever library was selected, its failures are covered by the
    # errors tuple.

    for text in ('{"virtualGuests": ', 'not json', '{"a": 1,}'):
        with pytest.raises(slrpc.json.errors):
            slrpc.json.loads(text)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
