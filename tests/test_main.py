import logging
import os

import pytest
import yaml

import backbeat.__main__
import backbeat.generator
import backbeat.settings


def _write_config (tmp_path, data: dict) -> str:

	path = tmp_path / "backbeat.yaml"
	path.write_text(yaml.safe_dump(data))
	return str(path)


def test_load_config (tmp_path) -> None:

	path = _write_config(tmp_path, {"generator": {"kit_style": "jazz", "bpm": 140}, "seed": 3})

	assert backbeat.__main__.load_config(path) == {"generator": {"kit_style": "jazz", "bpm": 140}, "seed": 3}


def test_load_config_missing_file (tmp_path, caplog: pytest.LogCaptureFixture) -> None:

	"""A missing config file is not an error: defaults apply and a warning is logged."""

	with caplog.at_level(logging.WARNING):
		assert backbeat.__main__.load_config(str(tmp_path / "nope.yaml")) == {}

	assert "not found" in caplog.text


def test_load_config_empty_file (tmp_path) -> None:

	path = tmp_path / "empty.yaml"
	path.write_text("")

	assert backbeat.__main__.load_config(str(path)) == {}


def test_flags_override_config () -> None:

	"""Command-line values win over the config file; unset flags leave config values alone."""

	config = {"generator": {"kit-style": "latin", "bpm": 100, "bars": 2}}
	args = backbeat.__main__.build_parser().parse_args(["--bpm", "150", "--complexity", "0.9"])

	settings = backbeat.__main__.resolve_settings(config, args)

	assert settings == backbeat.settings.GeneratorSettings(kit_style="latin", bpm=150, bars=2, complexity=0.9)


def test_resolve_midi_path (tmp_path) -> None:

	"""Directories get a generated filename; anything else is used as given."""

	pattern = backbeat.generator.generate(backbeat.settings.GeneratorSettings(bars=1), seed=1)

	directory = str(tmp_path / "out") + os.sep
	resolved = backbeat.__main__.resolve_midi_path(directory, pattern, "rock")

	assert resolved == os.path.join(directory, "rock-120bpm-4-4-1bars.mid")
	assert os.path.isdir(directory)

	assert backbeat.__main__.resolve_midi_path(str(tmp_path / "a.mid"), pattern, "rock") == str(tmp_path / "a.mid")


def test_main_prints_grid (tmp_path, capsys: pytest.CaptureFixture) -> None:

	config = _write_config(tmp_path, {"generator": {"kit_style": "electronic", "bars": 1}, "seed": 42})

	assert backbeat.__main__.main(["--config", config]) == 0

	out = capsys.readouterr().out
	assert out.startswith("electronic  4/4  120 BPM  1 bar")
	assert "Kick" in out


def test_main_writes_midi_without_grid (tmp_path, capsys: pytest.CaptureFixture) -> None:

	config = _write_config(tmp_path, {"output": {"midi": str(tmp_path / "patterns") + os.sep}})

	assert backbeat.__main__.main(["--config", config, "--style", "lofi", "--no-grid", "--seed", "1"]) == 0

	assert capsys.readouterr().out == ""
	assert os.listdir(tmp_path / "patterns") == ["lofi-120bpm-4-4-4bars.mid"]


def test_main_config_disables_grid (tmp_path, capsys: pytest.CaptureFixture) -> None:

	config = _write_config(tmp_path, {"output": {"grid": False}})

	assert backbeat.__main__.main(["--config", config]) == 0
	assert capsys.readouterr().out == ""


def test_main_rejects_invalid_settings (tmp_path) -> None:

	"""Out-of-range values exit with a usage error instead of generating."""

	config = _write_config(tmp_path, {"generator": {"bpm": 500}})

	with pytest.raises(SystemExit) as excinfo:
		backbeat.__main__.main(["--config", config])

	assert excinfo.value.code == 2


@pytest.mark.parametrize("generator", [
	{"bars": 4.0},
	{"complexity": "0.5"},
	{"bpm": 120.5},
])
def test_main_rejects_wrongly_typed_config (tmp_path, capsys: pytest.CaptureFixture, generator: dict) -> None:

	"""Badly typed YAML values end in a usage error, not a traceback from the generator."""

	config = _write_config(tmp_path, {"generator": generator})

	with pytest.raises(SystemExit) as excinfo:
		backbeat.__main__.main(["--config", config, "--no-grid"])

	assert excinfo.value.code == 2
	assert "must be" in capsys.readouterr().err


def test_parser_rejects_unknown_style () -> None:

	with pytest.raises(SystemExit):
		backbeat.__main__.build_parser().parse_args(["--style", "polka"])


def test_no_grid_flag_defaults_to_config () -> None:

	parser = backbeat.__main__.build_parser()

	assert parser.parse_args([]).grid is None
	assert parser.parse_args(["--no-grid"]).grid is False
