import pytest

from config.export_options import (
    DEFAULT_MAP_POOL, ENV_KEYS, ExportOptions, load_config_file, save_config_file,
)
from domain.exceptions import ConfigurationError


def test_precedence_cli_over_file_over_env():
    options = ExportOptions.resolve(
        cli={"org-id": "from-cli", "champ-name": None},
        file_cfg={"org-id": "from-file", "champ-name": "File Season", "game-id": ""},
        environ={"FACEIT_ORGANIZER_ID": "from-env", "FACEIT_CHAMP_NAME": "Env Season",
                 "FACEIT_GAME_ID": "csgo", "FACEIT_OUT_DIR": "exports"},
    )

    assert options.org_id == "from-cli"
    assert options.champ_name == "File Season"
    assert options.game_id == "csgo"
    assert options.out_dir == "exports"


def test_defaults():
    options = ExportOptions.resolve({}, {}, {})

    assert (options.game_id, options.out_dir) == ("cs2", "out")
    assert options.lb_group is None
    assert not options.skip_standings and not options.debug and not options.clean_out
    assert options.map_pool == tuple(DEFAULT_MAP_POOL.split(","))


@pytest.mark.parametrize("raw, expected", [
    ("1", True), ("true", True), ("YES", True), ("on", True),
    ("0", False), ("no", False), ("", False),
])
def test_env_booleans(raw, expected):
    options = ExportOptions.resolve({}, {}, {"FACEIT_DEBUG": raw})
    assert options.debug is expected


def test_false_cli_switch_does_not_hide_env():
    options = ExportOptions.resolve({"clean-out": False}, {}, {"FACEIT_CLEAN_OUT": "yes"})
    assert options.clean_out is True


def test_lb_group_parsing():
    assert ExportOptions.resolve({"lb-group": 0}, {}, {}).lb_group == 0
    assert ExportOptions.resolve({}, {"lb-group": "2"}, {}).lb_group == 2
    assert ExportOptions.resolve({}, {}, {"FACEIT_LB_GROUP": " 4 "}).lb_group == 4


def test_lb_group_not_an_integer():
    with pytest.raises(ConfigurationError):
        ExportOptions.resolve({}, {}, {"FACEIT_LB_GROUP": "first"})


def test_map_pool_from_list_or_csv():
    assert ExportOptions.resolve({}, {"map-pool": ["a", " b ", ""]}, {}).map_pool == ("a", "b")
    assert ExportOptions.resolve({}, {}, {"FACEIT_MAP_POOL": "x, y,,z"}).map_pool == ("x", "y", "z")


def test_validate_requires_organizer_and_championship():
    with pytest.raises(ConfigurationError, match="--org-id"):
        ExportOptions(champ_id="c1").validate()
    with pytest.raises(ConfigurationError, match="--champ-id"):
        ExportOptions(org_name="League").validate()
    ExportOptions(org_id="o1", champ_name="Season").validate()


def test_every_option_has_an_env_var():
    assert all(name.startswith("FACEIT_") for name in ENV_KEYS.values())


def test_config_file_round_trip(tmp_path):
    path = tmp_path / "faceit.config.json"
    save_config_file(path, {"org-id": "o1", "lb-group": 2})

    assert load_config_file(path) == {"org-id": "o1", "lb-group": 2}


def test_missing_or_malformed_config_file_is_empty(tmp_path):
    assert load_config_file(tmp_path / "absent.json") == {}

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert load_config_file(bad) == {}

    listed = tmp_path / "list.json"
    listed.write_text("[1, 2]", encoding="utf-8")
    assert load_config_file(listed) == {}
