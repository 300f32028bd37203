import fakeredis
import pytest

from redis_facade import (
    TTL_KEY_MISSING,
    TTL_NO_EXPIRY,
    CommandError,
    KeyType,
    RedisFacades,
    RedisList,
    TransactionError,
    WrongTypeError,
    create_facade,
)


class _FakeAcloseClient:
    def __init__(self) -> None:
        self.closed = False

    async def aclose(self) -> None:
        self.closed = True


class _FakeCloseOnlyClient:
    def __init__(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_typeof_reports_each_type(facade: RedisFacades) -> None:
    await facade.string.of("s").set("v")
    await facade.list.of("l").push("v")
    await facade.hash_map.of("h").set("f", "v")
    await facade.set.of("st").add("v")
    await facade.sorted_set.of("z").add("v")

    assert await facade.typeof("s") is KeyType.STRING
    assert await facade.typeof("l") is KeyType.LIST
    assert await facade.typeof("h") is KeyType.HASH
    assert await facade.typeof("st") is KeyType.SET
    assert await facade.typeof("z") is KeyType.ZSET
    assert await facade.typeof("missing") is KeyType.NONE


@pytest.mark.asyncio
async def test_typeof_rejects_unsupported_types(facade: RedisFacades) -> None:
    _ = await facade.exec("XADD", "events", "*", "field", "value")
    with pytest.raises(WrongTypeError, match="unsupported key type: stream"):
        await facade.typeof("events")


@pytest.mark.asyncio
async def test_facade_type_has_checks_type(facade: RedisFacades) -> None:
    await facade.list.of("items").push("a")
    assert await facade.list.has("items")
    assert not await facade.set.has("items")
    assert not await facade.list.has("missing")
    assert facade.list.facade_class is RedisList


@pytest.mark.asyncio
async def test_has_and_delete(facade: RedisFacades) -> None:
    await facade.string.of("k").set("v")
    assert await facade.has("k")
    assert await facade.delete("k")
    assert not await facade.has("k")
    assert not await facade.delete("k")


@pytest.mark.asyncio
async def test_exec_on_key_and_server(facade: RedisFacades) -> None:
    _ = await facade.exec("SET", "k", "v")
    assert await facade.exec("GET", "k") == "v"
    assert await facade.exec("PING") in (True, "PONG")


@pytest.mark.asyncio
async def test_exec_surfaces_store_rejections(facade: RedisFacades) -> None:
    with pytest.raises(CommandError):
        await facade.exec("NOSUCHCOMMAND", "k")


def test_is_same_compares_client_and_key(facade: RedisFacades) -> None:
    other = create_facade(facade.executor.client)
    separate = create_facade(fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True))

    assert facade.is_same(facade.list.of("a"), other.list.of("a"))
    assert facade.list.of("a").is_same(facade.set.of("a"))
    assert not facade.is_same(facade.list.of("a"), facade.list.of("b"))
    assert not facade.is_same(facade.list.of("a"), separate.list.of("a"))
    assert not facade.list.of("a").is_same("a")


def test_handles_require_non_empty_keys(facade: RedisFacades) -> None:
    with pytest.raises(ValueError, match="key must be a non-empty string"):
        _ = facade.list.of("")
    assert repr(facade.sorted_set.of("board")) == "RedisSortedSet('board')"


@pytest.mark.asyncio
async def test_ttl_sentinels(facade: RedisFacades) -> None:
    value = facade.string.of("k")
    assert await value.get_ttl() == TTL_KEY_MISSING
    assert await value.set_ttl(10) == 0
    await value.set("v")
    assert await value.get_ttl() == TTL_NO_EXPIRY
    assert await value.set_ttl(10) == 1
    assert 0 < await value.get_ttl() <= 10


@pytest.mark.asyncio
async def test_clear_is_idempotent(facade: RedisFacades) -> None:
    items = facade.list.of("items")
    await items.push("a")
    await items.clear()
    await items.clear()
    assert not await facade.has("items")


@pytest.mark.asyncio
async def test_batch_injects_key_and_keeps_order(facade: RedisFacades) -> None:
    items = facade.list.of("items")
    replies = await items.batch(("RPUSH", "a", "b"), ("LRANGE", 0, -1), ("LLEN",))
    assert replies == [2, ["a", "b"], 2]
    assert await items.batch() == []


@pytest.mark.asyncio
async def test_batch_failure_does_not_roll_back(facade: RedisFacades) -> None:
    items = facade.list.of("items")
    with pytest.raises(TransactionError) as excinfo:
        await items.batch(("RPUSH", "a"), ("INCR",))
    assert isinstance(excinfo.value.__cause__, WrongTypeError)
    assert await items.values() == ["a"]


@pytest.mark.asyncio
async def test_batch_rejects_empty_commands(facade: RedisFacades) -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        await facade.list.of("items").batch(())


@pytest.mark.asyncio
async def test_close_prefers_aclose() -> None:
    client = _FakeAcloseClient()
    await create_facade(client).close()
    assert client.closed is True


@pytest.mark.asyncio
async def test_close_falls_back_to_close() -> None:
    client = _FakeCloseOnlyClient()
    async with create_facade(client):
        pass
    assert client.closed is True


@pytest.mark.asyncio
async def test_close_without_close_methods_is_noop() -> None:
    await create_facade(object()).close()
