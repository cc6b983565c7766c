"""
Device seeding script
---------------------

Purpose:
- Register a few sample devices so the control endpoints can be exercised.

How to use:
1) Set STORAGE_BACKEND=mongo and MONGO_URI (and optionally DB_NAME) in .env
2) Run:
   python -m scripts.seed_devices
3) Start the API:
   uvicorn home_control.main:app
"""
import logging
from typing import List, Tuple

from home_control.application.services.device_service import DeviceService
from home_control.core.logging_config import configure_logging
from home_control.di.container import build_container
from home_control.domain.exceptions import DeviceAlreadyExistsError
from home_control.domain.models.device import DeviceStatus

logger = logging.getLogger(__name__)

SAMPLE_DEVICES: List[Tuple[str, str, DeviceStatus]] = [
    ("lamp-1", "Living Room Lamp", DeviceStatus.OFF),
    ("plug-kettle", "Kitchen Kettle Plug", DeviceStatus.OFF),
    ("fan-bedroom", "Bedroom Fan", DeviceStatus.ON),
]


def main() -> None:
    configure_logging()
    service = build_container().get(DeviceService)

    for device_id, name, status in SAMPLE_DEVICES:
        try:
            device = service.register_device(device_id=device_id, name=name, status=status)
            logger.info(f"Registered {device.device_id} ({device.status.value})")
        except DeviceAlreadyExistsError:
            logger.info(f"{device_id} already registered, skipping")


if __name__ == "__main__":
    main()
