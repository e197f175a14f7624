import pytest

from pathgraph.config import DEFAULT_CONFIG, GraphConfig, load_config


def test_defaults():
    assert DEFAULT_CONFIG == GraphConfig()
    assert DEFAULT_CONFIG.capacity == 10
    assert DEFAULT_CONFIG.row_delimiter == "\n"
    assert DEFAULT_CONFIG.field_delimiter == ";"


def test_in_domain():
    config = GraphConfig(capacity=3)
    assert [config.in_domain(i) for i in (-1, 0, 2, 3)] == [False, True, True, False]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"capacity": 0},
        {"capacity": -5},
        {"capacity": 2.5},
        {"capacity": True},
        {"row_delimiter": ""},
        {"field_delimiter": ""},
        {"row_delimiter": ";", "field_delimiter": ";"},
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        GraphConfig(**kwargs)


def test_from_dict_unknown_key():
    with pytest.raises(ValueError, match="Unknown configuration keys: size"):
        GraphConfig.from_dict({"capacity": 5, "size": 3})


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text('capacity: 32\nfield_delimiter: ","\n', encoding="utf-8")
    config = load_config(path)
    assert config == GraphConfig(capacity=32, field_delimiter=",")


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == GraphConfig()


def test_load_config_not_a_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="must be a mapping"):
        load_config(path)
