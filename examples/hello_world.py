"""
replitdb — Hello World

Set a few keys, read them back, then clean up.  Needs REPLIT_DB_URL.
"""

import asyncio

from replitdb import DecodeError, StoreClient


async def main():
    # ──────────────────────────────────────
    #  1. Create the client (URL from REPLIT_DB_URL)
    # ──────────────────────────────────────
    db = StoreClient()

    # ──────────────────────────────────────
    #  2. Single keys (calls chain)
    # ──────────────────────────────────────
    await (await db.set("user:alice", {"plan": "pro", "credits": 10})).set("user:bob", None)

    print("alice:", await db.get("user:alice"))
    print("bob:  ", await db.get("user:bob"))  # stored null reads as None
    print("bob found?", (await db.lookup("user:bob")).found)

    # ──────────────────────────────────────
    #  3. Many keys (writes in order, deletes in parallel)
    # ──────────────────────────────────────
    await db.set_all({"user:carol": [1, 2, 3], "user:dave": "hi"})
    print("users:", await db.list("user:"))
    print("all:  ", await db.get_all())

    try:
        await db.get("not-json")
    except DecodeError as e:
        print("raw fallback:", repr(await db.get(e.key, raw=True)))

    await db.delete_multiple("user:alice", "user:bob", "user:carol", "user:dave")
    print("left: ", await db.list("user:"))


if __name__ == "__main__":
    asyncio.run(main())
