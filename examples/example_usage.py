"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the request lifecycle lives in the services.
"""

import importlib

from config import get_settings_module

from src.vacation_system.vacation_system.container import build_container
from src.vacation_system.vacation_system.requests.presenter import views_to_list


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)
    print(views_to_list(container.request_service.list_for_validator(status="Pending")))


if __name__ == "__main__":
    main()
