import pytest

from dongle_registry.domain.bindings import (
    Binding,
    PortNaming,
    SerializationError,
    decode_properties,
    encode_properties,
)


def test_port_naming_builds_and_parses_paths():
    naming = PortNaming()

    assert naming.path_for(3) == "/dev/ttyUSB3"
    assert naming.index_for("/dev/ttyUSB12") == 12
    assert PortNaming("/dev/ttyACM").path_for(0) == "/dev/ttyACM0"


@pytest.mark.parametrize("path", ["/dev/ttyACM0", "/dev/ttyUSB", "/dev/ttyUSBx1", "/dev/ttyUSB-1"])
def test_port_naming_rejects_foreign_paths(path):
    with pytest.raises(ValueError):
        PortNaming().index_for(path)


def test_port_naming_rejects_negative_index():
    with pytest.raises(ValueError):
        PortNaming().path_for(-1)


def test_binding_from_port_derives_index():
    binding = Binding.from_port(
        physical_id="356789012345678",
        subscriber_id="639020000000001",
        port_path="/dev/ttyUSB4",
        naming=PortNaming(),
    )

    assert binding.port_index == 4
    assert binding.properties is None


def test_binding_json_view_uses_wire_names():
    binding = Binding(
        physical_id="356789012345678",
        subscriber_id="639020000000001",
        port_path="/dev/ttyUSB0",
        port_index=0,
        is_symlinked=True,
        identity="Manufacturer: huawei",
        properties={"ID_VENDOR_ID": "12d1"},
    )

    assert binding.to_dict() == {
        "imei": "356789012345678",
        "imsi": "639020000000001",
        "path": "/dev/ttyUSB0",
        "symlink": True,
        "ati": "Manufacturer: huawei",
        "properties": {"ID_VENDOR_ID": "12d1"},
    }


def test_properties_codec_keeps_absent_and_empty_apart():
    assert encode_properties(None) is None
    assert decode_properties(None) is None
    assert decode_properties(encode_properties({})) == {}
    assert decode_properties(encode_properties({"a": "1"})) == {"a": "1"}


@pytest.mark.parametrize("properties", [{"signal": 17}, {1: "one"}, ["not", "a", "mapping"]])
def test_encode_rejects_non_string_mappings(properties):
    with pytest.raises(SerializationError):
        encode_properties(properties)


@pytest.mark.parametrize("blob", [b"{not json", b"[]", b'{"signal": 17}'])
def test_decode_rejects_malformed_blobs(blob):
    with pytest.raises(SerializationError):
        decode_properties(blob)
