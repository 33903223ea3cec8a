import pytest

import main


def test_flags_override_config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"strategy": "large", "count": 500, "size": 20.0, "seed": 3}')
    args = main.parse_args(["--config", str(path), "--count", "25", "--strategy", "small"])
    config = main.build_config(args)
    assert config.strategy == "small"
    assert config.count == 25
    assert config.size == 20.0
    assert config.seed == 3


def test_defaults_without_config():
    config = main.build_config(main.parse_args([]))
    assert config.strategy == "large"
    assert config.count == 1000


def test_main_runs():
    summary = main.main(["--strategy", "small", "--count", "20", "--min_distance", "0.5",
                         "--size", "5", "--seed", "3", "--log_level", "warning"])
    assert summary["count"] == 20


def test_log_level_is_checked():
    assert main.parse_args(["--log_level", "debug"]).log_level == "DEBUG"
    with pytest.raises(SystemExit):
        main.parse_args(["--log_level", "chatty"])
