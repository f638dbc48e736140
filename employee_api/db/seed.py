"""
Schema Creation & Data Seeding
=============================================================================
CONCEPT: Startup Provisioning

Before the first request is served the employee table must exist, and for
demos it should hold some rows. prepare_database() does both:

  1. create_schema()   CREATE TABLE IF NOT EXISTS via metadata.create_all
  2. seeding policy    generate_data           -> always insert data_size rows
                       generate_data_if_empty  -> insert only into an empty table

Synthetic employees get a random sex, a first name matching it, a last name
and an address on the faux-ltd.com domain.
=============================================================================
"""

import random
from dataclasses import asdict, dataclass

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncEngine

from employee_api.config import Settings
from employee_api.db.engine import Base
from employee_api.db.models import SEX_VALUES, Employee
from employee_api.observability.logging import get_logger

logger = get_logger(__name__)

EMAIL_DOMAIN = "faux-ltd.com"

FIRST_NAMES = {
    "male": [
        "James", "Omar", "Lucas", "Kenji", "Mateo", "Samuel", "Karim",
        "Noah", "Ivan", "Tariq", "Elias", "Hugo", "Daniel", "Felix",
    ],
    "female": [
        "Amina", "Sofia", "Yuki", "Fatima", "Chloe", "Ingrid", "Leila",
        "Maya", "Nadia", "Grace", "Elena", "Zara", "Priya", "Clara",
    ],
}

LAST_NAMES = [
    "Benali", "Okafor", "Schmidt", "Tanaka", "Garcia", "Moreau", "Novak",
    "Haddad", "Johansson", "Kowalski", "Mensah", "Rossi", "Silva", "Walsh",
    "Zerhouni", "Nguyen", "Fischer", "Costa", "Brennan", "Ahmed",
]


@dataclass(frozen=True)
class EmployeeSeed:
    name: str
    email: str
    sex: str


def generate_employee(rng: random.Random) -> EmployeeSeed:
    """Build one synthetic employee."""
    sex = rng.choice(SEX_VALUES)
    first_name = rng.choice(FIRST_NAMES[sex])
    last_name = rng.choice(LAST_NAMES)
    email = f"{first_name}.{last_name}@{EMAIL_DOMAIN}".lower()
    return EmployeeSeed(name=f"{first_name} {last_name}", email=email, sex=sex)


async def create_schema(engine: AsyncEngine) -> None:
    """Create the employee table if it does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def count_employees(engine: AsyncEngine) -> int:
    async with engine.connect() as conn:
        result = await conn.execute(select(func.count(Employee.id)))
        return result.scalar_one()


async def seed_employees(
    engine: AsyncEngine, count: int = 10, rng: random.Random | None = None
) -> int:
    """Insert `count` synthetic employees. Returns the number inserted."""
    if count < 1:
        return 0

    rng = rng or random.Random()
    rows = [asdict(generate_employee(rng)) for _ in range(count)]

    async with engine.begin() as conn:
        await conn.execute(insert(Employee), rows)

    logger.info("database_seeded", inserted=len(rows))
    return len(rows)


async def prepare_database(engine: AsyncEngine, app_settings: Settings) -> int:
    """
    Create the schema and apply the seeding policy from settings.

    Returns the number of employees inserted (0 when nothing was seeded).
    """
    await create_schema(engine)

    if app_settings.generate_data:
        return await seed_employees(engine, app_settings.data_size)

    if app_settings.generate_data_if_empty:
        existing = await count_employees(engine)
        if existing == 0:
            return await seed_employees(engine, app_settings.data_size)
        logger.info("seeding_skipped", existing=existing)

    return 0
