"""A generic handle on one remote service."""

from __future__ import annotations

from typing import Any, Optional

from .options import Options


class Service:
    """ Fluent wrapper binding a session to a service name. Every option
        method returns a new handle, leaving the original untouched::

            account = session.service('SoftLayer_Account')
            vlans = account.mask('id;vlanNumber').limit(10).call('getNetworkVlans')
    """

    def __init__(self, session, name: str, options: Optional[Options] = None):
        self.session = session
        self.name = name
        self.options = options if options is not None else Options()

    def __repr__(self):
        return f"Service({self.name!r}, {self.options!r})"

    def _derive(self, options: Options) -> Service:
        return Service(self.session, self.name, options)

    def id(self, id: int) -> Service:
        return self._derive(self.options.with_id(id))

    def mask(self, mask: str) -> Service:
        return self._derive(self.options.with_mask(mask))

    def filter(self, filter: str) -> Service:
        return self._derive(self.options.with_filter(filter))

    def limit(self, limit: int) -> Service:
        return self._derive(self.options.with_limit(limit))

    def offset(self, offset: int) -> Service:
        return self._derive(self.options.with_offset(offset))

    def call(self, method: str, *args, result=None) -> Any:
        return self.session.do_request(self.name, method, args, self.options, result)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
