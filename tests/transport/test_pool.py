import threading
import time

import pytest

import slrpc


class Thing:
    closed = False

    def close(self):
        self.closed = True


def test_create_once():

    pool = slrpc.ClientPool()
    created = list()

    def factory():
        thing = Thing()
        created.append(thing)
        return thing

    first = pool.get_or_create('Widget', factory)
    second = pool.get_or_create('Widget', factory)

    assert first is second
    assert len(created) == 1
    assert 'Widget' in pool
    assert pool.get('Widget') is first
    assert pool.get('Gadget') is None
    assert len(pool) == 1


def test_factory_failure_leaves_no_entry():

    pool = slrpc.ClientPool()

    def broken():
        raise slrpc.ClientCreationError('no')

    with pytest.raises(slrpc.ClientCreationError):
        pool.get_or_create('Widget', broken)

    assert 'Widget' not in pool

    thing = pool.get_or_create('Widget', Thing)
    assert pool.get('Widget') is thing


def test_concurrent_first_use():

    pool = slrpc.ClientPool()
    created = list()
    received = list()
    threads = 8
    barrier = threading.Barrier(threads)

    def slow_factory():
        time.sleep(0.05)
        thing = Thing()
        created.append(thing)
        return thing

    def worker():
        barrier.wait()
        received.append(pool.get_or_create('Widget', slow_factory))

    workers = [threading.Thread(target=worker) for _ in range(threads)]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()

    assert len(created) == 1
    assert len(received) == threads
    for thing in received:
        assert thing is created[0]


def test_close():

    pool = slrpc.ClientPool()
    first = pool.get_or_create('Widget', Thing)
    second = pool.get_or_create('Gadget', Thing)

    pool.close()

    assert first.closed
    assert second.closed
    assert len(pool) == 0


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
