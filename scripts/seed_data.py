"""
Seed Data Script: Populate the employee table with synthetic data
=============================================================================
Creates the employees table if needed and inserts synthetic employees,
independently of the API server's own startup seeding.

Run: python scripts/seed_data.py --count 25
     python scripts/seed_data.py --count 25 --reset --seed 42
=============================================================================
"""

import argparse
import asyncio
import random

from employee_api.config import settings
from employee_api.db.engine import create_engine, reset_database_file
from employee_api.db.seed import count_employees, create_schema, seed_employees
from employee_api.observability.logging import setup_logging


async def run(database_url: str, count: int, reset: bool, seed: int | None) -> None:
    if reset:
        reset_database_file(database_url)

    engine = create_engine(database_url)
    try:
        await create_schema(engine)
        inserted = await seed_employees(engine, count, rng=random.Random(seed))
        total = await count_employees(engine)
    finally:
        await engine.dispose()

    print(f"Inserted {inserted} employees ({total} in table)")


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the employee table with synthetic rows.")
    parser.add_argument("--database-url", default=settings.database_url)
    parser.add_argument("--count", type=int, default=settings.data_size)
    parser.add_argument("--reset", action="store_true", help="Delete the SQLite file first")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data")
    args = parser.parse_args()

    setup_logging(settings.log_level, debug=settings.debug)
    asyncio.run(run(args.database_url, args.count, args.reset, args.seed))


if __name__ == "__main__":
    main()
