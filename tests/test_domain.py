from dataclasses import dataclass
from typing import Annotated

from configbind.introspector import TypeIntrospector
from configbind.markers import Property


@dataclass(frozen=True)
class ServerConfig:
    host: Annotated[str, Property()]
    port: Annotated[int, Property(name="listen_port")]


class StringToTypeConverter:
    def __init__(self):
        self.calls = []

    def convert(self, value, target_type, prop):
        self.calls.append((value, target_type, prop.name))
        return target_type(value)


def test_get_value_reads_field_off_instance():
    host, port = TypeIntrospector(ServerConfig).properties()
    config = ServerConfig("localhost", 8080)

    assert host.get_value(config) == "localhost"
    assert port.get_value(config) == 8080


def test_set_value_writes_raw_value_without_converter():
    _, port = TypeIntrospector(ServerConfig).properties()
    config = ServerConfig("localhost", 8080)

    port.set_value(config, "9090")

    assert config.port == "9090"


def test_set_value_converts_with_converter():
    converter = StringToTypeConverter()
    _, port = TypeIntrospector(ServerConfig, converter).properties()
    config = ServerConfig("localhost", 8080)

    port.set_value(config, "9090")

    assert config.port == 9090
    assert converter.calls == [("9090", int, "listen_port")]


def test_properties_compare_equal_regardless_of_converter():
    assert TypeIntrospector(ServerConfig).properties() == TypeIntrospector(
        ServerConfig, StringToTypeConverter()
    ).properties()
