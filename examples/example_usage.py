"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from training_scheduler.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    print(container.analytics_service.summary())
    for view in container.session_service.list_sessions()[:5]:
        print(view.session.start_time, f"{view.participant_count}/{view.session.max_participants}")


if __name__ == "__main__":
    main()
