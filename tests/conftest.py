import xmlrpc.client

import httpx
import pytest

import slrpc


class FakeEndpoint:
    """ An in-process stand-in for the remote API. Every request is
        recorded; the reply is whatever the test last configured.
    """

    def __init__(self):
        self.requests = list()
        self.value = None
        self.fault = None
        self.status = 200
        self.body = None
        self.error = None

    def handler(self, request):
        self.requests.append(request)

        if self.error is not None:
            raise self.error

        if self.body is not None:
            content = self.body
        elif self.fault is not None:
            code, text = self.fault
            content = xmlrpc.client.dumps(xmlrpc.client.Fault(code, text), allow_none=True)
        else:
            content = xmlrpc.client.dumps((self.value,), methodresponse=True, allow_none=True)

        if isinstance(content, str):
            content = content.encode()

        return httpx.Response(self.status, content=content, headers={'Content-Type': 'text/xml'})

    def calls(self):
        """ Return (method, params) for every recorded request.
        """

        decoded = list()
        for request in self.requests:
            params, method = xmlrpc.client.loads(request.content)
            decoded.append((method, params))
        return decoded


@pytest.fixture
def endpoint():
    return FakeEndpoint()


@pytest.fixture
def pool():
    pool = slrpc.ClientPool()
    yield pool
    pool.close()


@pytest.fixture
def transport(endpoint, pool):
    return slrpc.XmlRpcTransport(pool=pool, http_transport=httpx.MockTransport(endpoint.handler))


@pytest.fixture
def session(transport):
    return slrpc.Session('https://api.example.com', 'u', 'k', transport=transport)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
