"""
Seed the database with a small demo pedigree.

Horses are created through the horse service, so every record passes the
same validation as an API submission.
"""

import asyncio
import os
import sys
from datetime import date

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from studbook.database import AsyncSessionLocal, init_db  # noqa: E402
from studbook.schemas import HorseCreate, OwnerCreate, Sex  # noqa: E402
from studbook.services import HorseService, OwnerService  # noqa: E402


async def seed() -> None:
    """Create owners and three generations of horses."""
    await init_db()

    async with AsyncSessionLocal() as session:
        owner = await OwnerService(session).create_owner(
            OwnerCreate(first_name="Sarah", last_name="Brennan", email="sarah@example.com")
        )
        horses = HorseService(session)

        async def add(name: str, born: date, sex: Sex, parents: list[int]) -> int:
            horse = await horses.create_horse(HorseCreate(
                name=name,
                date_of_birth=born,
                sex=sex,
                owner_id=owner.id,
                parent_ids=parents,
            ))
            print(f"  {horse.id:>3}  {name}")
            return horse.id

        print("Creating horses")
        granddam = await add("Wendy", date(1998, 4, 2), Sex.FEMALE, [])
        grandsire = await add("Hugo", date(1996, 5, 11), Sex.MALE, [])
        dam = await add("Bella", date(2005, 3, 20), Sex.FEMALE, [granddam, grandsire])
        sire = await add("Rocky", date(2003, 6, 1), Sex.MALE, [])
        await add("Luna", date(2012, 2, 14), Sex.FEMALE, [dam, sire])

        await session.commit()

    print("Done")


def main():
    asyncio.run(seed())


if __name__ == "__main__":
    main()
