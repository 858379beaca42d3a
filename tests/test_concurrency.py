from concurrent.futures import ThreadPoolExecutor

from dongle_registry.core.config import DatabaseSettings, Settings
from dongle_registry.core.container import open_registry
from dongle_registry.domain.bindings import BindingConflictError


def test_concurrent_inserts_on_one_port_have_a_single_winner(registry, make_binding):
    contenders = [make_binding(imei=f"86{n:013d}", index=3) for n in range(6)]

    def attempt(binding):
        try:
            registry.insert(binding)
        except BindingConflictError:
            return False
        return True

    with ThreadPoolExecutor(max_workers=len(contenders)) as pool:
        outcomes = list(pool.map(attempt, contenders))

    assert outcomes.count(True) == 1
    winner = contenders[outcomes.index(True)]
    assert registry.get_by_path("/dev/ttyUSB3").physical_id == winner.physical_id


def test_concurrent_inserts_on_distinct_ports_all_land(registry, make_binding):
    bindings = [make_binding(imei=f"dev{n % 3}", index=n) for n in range(12)]

    with ThreadPoolExecutor(max_workers=4) as pool:
        list(pool.map(registry.insert, bindings))

    assert len(registry.get_all()) == 12
    assert {b.physical_id: b.port_index for b in registry.get_distinct_devices()} == {
        "dev0": 0,
        "dev1": 1,
        "dev2": 2,
    }


def test_in_memory_store_serves_concurrent_callers(make_binding):
    settings = Settings(database=DatabaseSettings(url="sqlite://"))
    bindings = [make_binding(imei=f"dev{n % 5}", index=n) for n in range(40)]

    with open_registry(settings) as registry:
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(registry.insert, bindings))
            seen = list(pool.map(lambda b: registry.exists(b), bindings))

        assert all(seen)
        assert len(registry.get_all()) == 40
        assert {b.physical_id: b.port_index for b in registry.get_distinct_devices()} == {
            f"dev{n}": n for n in range(5)
        }
