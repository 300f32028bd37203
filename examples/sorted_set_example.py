"""Leaderboard built on the sorted set facade."""

import asyncio

from redis_facade import create_facade


async def main() -> None:
    """Rank players and read score ranges."""
    async with create_facade(url="redis://redis:6379/0") as facade:
        board = facade.sorted_set.of("example:board")
        await board.clear()
        await board.add({"alice": 30, "bob": 12, "carol": 30})
        _ = await board.increase("bob", 20)
        print("ranking:", await board.values())
        print("top:", await board.pop_with_score())
        print("between 10 and 30:", await board.slice_by_score(10, 30))
        print("typeof:", await facade.typeof("example:board"))


if __name__ == "__main__":
    asyncio.run(main())
