import pytest

from dongle_registry.core.config import DatabaseSettings, Settings
from dongle_registry.core.container import open_registry
from dongle_registry.domain.bindings import Binding


@pytest.fixture
def settings(tmp_path):
    return Settings(database=DatabaseSettings(url=f"sqlite:///{tmp_path / 'devices.db'}"))


@pytest.fixture
def registry(settings):
    registry = open_registry(settings)
    yield registry
    registry.close()


@pytest.fixture
def make_binding():
    def _make(imei="A", index=0, imsi="639020000000001", **overrides):
        values = {
            "physical_id": imei,
            "subscriber_id": imsi,
            "port_path": f"/dev/ttyUSB{index}",
            "port_index": index,
            "identity": "Manufacturer: huawei Model: E1550",
        }
        values.update(overrides)
        return Binding(**values)

    return _make
