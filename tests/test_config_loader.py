import pytest

from grocery_inventory.config.loader import InventoryConfig, config_from_dict, load_inventory_config
from grocery_inventory.exceptions import ConfigError


def test_embedded_config_matches_defaults():
    config = load_inventory_config()
    assert config == InventoryConfig()


def test_load_from_path(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text(
        "quality_max: 50\n"
        "removal_sell_in: -3\n"
        "exact_names:\n"
        "  Honey: unchanging\n"
        "prefixes:\n"
        "  - prefix: aged\n"
        "    kind: appreciating\n"
        "rates:\n"
        "  standard:\n"
        "    fresh: -2\n",
        encoding="utf-8",
    )
    config = load_inventory_config(str(path))
    assert config.quality_max == 50
    assert config.quality_min == 0
    assert config.removal_sell_in == -3
    assert config.exact_names == {"Honey": "unchanging"}
    assert config.prefixes == [("aged", "appreciating")]
    assert config.rates == {"standard": {"fresh": -2}}
    assert config.default_kind == "standard"


def test_empty_prefix_list_disables_prefix_rules():
    config = config_from_dict({"prefixes": []})
    assert config.prefixes == []


def test_empty_exact_names_disables_exact_rules():
    assert config_from_dict({"exact_names": {}}).exact_names == {}
    assert config_from_dict({"exact_names": None}).exact_names == {}


def test_missing_exact_names_uses_defaults():
    assert config_from_dict({}).exact_names == InventoryConfig().exact_names


def test_unknown_rate_keys_logged(caplog):
    with caplog.at_level("WARNING", logger="grocery_inventory.config.loader"):
        config = config_from_dict({"rates": {"standard": {"fressh": -3, "expired": -4}}})
    assert "fressh" in caplog.text
    assert config.rates == {"standard": {"fressh": -3, "expired": -4}}


def test_unchanging_rate_overrides_logged(caplog):
    with caplog.at_level("WARNING", logger="grocery_inventory.config.loader"):
        config_from_dict({"rates": {"unchanging": {"fresh": -1}}})
    assert "no effect" in caplog.text


def test_unknown_kind_rejected():
    with pytest.raises(ConfigError, match="Unknown strategy kind"):
        config_from_dict({"exact_names": {"Milk": "sour"}})


def test_inverted_bounds_rejected():
    with pytest.raises(ConfigError):
        config_from_dict({"quality_min": 10, "quality_max": 5})


def test_malformed_prefix_entry_rejected():
    with pytest.raises(ConfigError, match="Malformed"):
        config_from_dict({"prefixes": [{"kind": "standard"}]})


def test_non_mapping_yaml_rejected(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_inventory_config(str(path))


def test_missing_file_raises_config_error(tmp_path):
    with pytest.raises(ConfigError):
        load_inventory_config(str(tmp_path / "missing.yaml"))
