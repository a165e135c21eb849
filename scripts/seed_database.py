#!/usr/bin/env python3
"""
EVPlanner - Database Bootstrap
Creates the tables, the default admin and the sample catalog
"""
import asyncio
from collections import Counter

from sqlalchemy import select

from evplanner.config import get_settings
from evplanner.database import init_db, async_session_maker
from evplanner.models.product import Product
from evplanner.services.auth import create_default_admin
from evplanner.services.seed import seed_database


async def main():
    settings = get_settings()
    await init_db()

    async with async_session_maker() as session:
        await create_default_admin(session)
        inserted = await seed_database(session)

        result = await session.execute(select(Product.origin))
        origins = Counter(row[0] or "Unknown" for row in result.fetchall())

    print(f"✅ {inserted} products inserted into {settings.database_url}")
    print("\n🌍 Products by origin:")
    for origin, count in origins.most_common():
        print(f"   • {origin}: {count}")


if __name__ == "__main__":
    asyncio.run(main())
