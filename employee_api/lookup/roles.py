"""
Role Lookup Store

Loads the static list of job roles from a JSON file into memory at startup.
The file is read once; the store is immutable afterwards and shared by all
requests.

Expected file shape:
    [
        {"id": 1, "title": "Software Engineer", "department": "Engineering",
         "description": "..."},
        ...
    ]
"""

import json
from pathlib import Path

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from employee_api.observability.logging import get_logger

logger = get_logger(__name__)


class RoleDataError(ValueError):
    """The roles file exists but its content is unusable."""


class Role(BaseModel):
    id: int
    title: str
    department: str
    description: str = ""


_ROLE_LIST = TypeAdapter(list[Role])


class RoleStore:
    """In-memory, read-only collection of roles."""

    def __init__(self, roles: list[Role]):
        self._roles = tuple(roles)
        self._by_id = {role.id: role for role in self._roles}
        if len(self._by_id) != len(self._roles):
            raise RoleDataError("Duplicate role ids in roles data")

    def __len__(self) -> int:
        return len(self._roles)

    def all(self) -> list[Role]:
        return list(self._roles)

    def get(self, role_id: int) -> Role | None:
        return self._by_id.get(role_id)

    def by_department(self, department: str) -> list[Role]:
        """Roles whose department matches, ignoring case and surrounding whitespace."""
        wanted = department.strip().lower()
        return [role for role in self._roles if role.department.lower() == wanted]


def load_roles(path: str | Path) -> RoleStore:
    """
    Load the roles JSON file into a RoleStore.

    Args:
        path: Path to the roles JSON file

    Returns:
        RoleStore holding every role in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        RoleDataError: If the file is not valid JSON, does not match the
            expected shape, or repeats a role id
    """
    roles_path = Path(path)

    if not roles_path.is_file():
        logger.error("roles_file_missing", path=str(roles_path))
        raise FileNotFoundError(f"Roles file not found: {roles_path}")

    try:
        raw = json.loads(roles_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.error("roles_file_invalid_json", path=str(roles_path), error=str(e))
        raise RoleDataError(f"Invalid JSON in roles file {roles_path}: {e}") from e

    try:
        roles = _ROLE_LIST.validate_python(raw)
    except PydanticValidationError as e:
        logger.error("roles_file_invalid_shape", path=str(roles_path), errors=e.error_count())
        raise RoleDataError(f"Roles file {roles_path} does not match the role schema") from e

    store = RoleStore(roles)
    logger.info("roles_loaded", path=str(roles_path), count=len(store))
    return store
