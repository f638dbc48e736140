"""Run the API with uvicorn: python -m employee_api"""

import uvicorn

from employee_api.config import settings


def main() -> None:
    uvicorn.run(
        "employee_api.main:app",
        host=settings.host,
        port=settings.port_number,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
