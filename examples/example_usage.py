"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the scheduling rules live in the services.
"""

import importlib

from config import get_settings_module

from doggy_daycare.container import build_container
from doggy_daycare.dogs.model import DogSchedule
from doggy_daycare.storage.paths import resolve_data_path


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        data_path=resolve_data_path(data_file=settings.DATA_FILE, dev_mode=settings.DEV_MODE),
        forward_window_days=settings.FORWARD_WINDOW_DAYS,
    )
    dog = container.dog_service.add_dog(
        name="Rex",
        owner="Jordan River",
        schedule=DogSchedule(daycare_days=[1, 3, 5], daycare_drop_off="08:00", daycare_pick_up="17:00"),
    )
    print(container.schedule_service.list_schedules(dog_id=dog.id))


if __name__ == "__main__":
    main()
