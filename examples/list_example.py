"""Minimal example for the list facade against a Redis-compatible server."""

import asyncio

from redis_facade import create_facade


async def main() -> None:
    """Run push/splice/sort against Redis/Dragonfly."""
    async with create_facade(url="redis://redis:6379/0") as facade:
        todo = facade.list.of("example:todo")
        await todo.clear()
        await todo.push("a", "b", "c", "d")
        print("removed:", await todo.splice(1, 2, "x"))
        print("now:", await todo.values())
        print("last:", await todo.get(-1))

        scores = facade.list.of("example:scores")
        await scores.clear()
        await scores.push("3", "10", "1")
        print("sorted desc:", await scores.sort(-1))


if __name__ == "__main__":
    asyncio.run(main())
