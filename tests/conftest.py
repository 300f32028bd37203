from collections.abc import Callable

import fakeredis
import pytest

from redis_facade import RedisFacades, create_facade


@pytest.fixture
def server() -> fakeredis.FakeServer:
    return fakeredis.FakeServer()


@pytest.fixture
def client(server: fakeredis.FakeServer) -> fakeredis.FakeAsyncRedis:
    return fakeredis.FakeAsyncRedis(server=server, decode_responses=True)


@pytest.fixture
def facade(client: fakeredis.FakeAsyncRedis) -> RedisFacades:
    return create_facade(client)


@pytest.fixture
def fresh_facade() -> Callable[[], RedisFacades]:
    """Build an isolated facade per call, for property tests that run many examples."""

    def build() -> RedisFacades:
        return create_facade(fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True))

    return build
