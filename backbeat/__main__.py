"""Command-line entry point: generate a pattern, print its grid, optionally export MIDI.

Settings come from a YAML config file (``backbeat.yaml`` by default) and can be
overridden with flags::

	python -m backbeat --style jazz --bars 4 --complexity 0.7 --midi out/

Config layout::

	generator:
	  kit_style: latin
	  time_signature: 4/4
	  bpm: 110
	  bars: 4
	  complexity: 0.6
	  dynamics: 0.4
	seed: 42
	output:
	  midi: patterns/      # file path, or a directory for an auto-generated name
	  grid: true
"""

import argparse
import logging
import os
import sys
import typing

import yaml

import backbeat.display
import backbeat.generator
import backbeat.midi_export
import backbeat.pattern
import backbeat.settings
import backbeat.time_signature


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "backbeat.yaml"


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def build_parser () -> argparse.ArgumentParser:

	"""Create the argument parser. Flags left unset fall back to the config file."""

	parser = argparse.ArgumentParser(prog="backbeat", description="Generate algorithmic drum patterns")

	parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="YAML config file (default: %(default)s)")
	parser.add_argument("--style", dest="kit_style", choices=backbeat.settings.KIT_STYLES, help="Kit style")
	parser.add_argument("--time-signature", dest="time_signature", choices=backbeat.time_signature.TIME_SIGNATURES, help="Time signature")
	parser.add_argument("--bpm", type=int, help="Tempo in BPM (60-200)")
	parser.add_argument("--bars", type=int, choices=backbeat.settings.BAR_OPTIONS, help="Pattern length in bars")
	parser.add_argument("--complexity", type=float, help="0.0 (sparse) to 1.0 (busy)")
	parser.add_argument("--dynamics", type=float, help="0.0 (quiet) to 1.0 (loud)")
	parser.add_argument("--seed", type=int, help="Random seed for a repeatable pattern")
	parser.add_argument("--midi", help="Write a MIDI file to this path, or into this directory")
	parser.add_argument("--no-grid", dest="grid", action="store_false", default=None, help="Do not print the pattern grid")

	return parser


def resolve_settings (config: dict, args: argparse.Namespace) -> backbeat.settings.GeneratorSettings:

	"""Merge config-file generator settings with command-line overrides."""

	values: typing.Dict[str, typing.Any] = dict(config.get('generator', {}) or {})

	for name in ("kit_style", "time_signature", "bpm", "bars", "complexity", "dynamics"):
		value = getattr(args, name)
		if value is not None:
			values[name] = value

	return backbeat.settings.GeneratorSettings.from_dict(values)


def resolve_midi_path (target: str, pattern: "backbeat.pattern.Pattern", kit_style: str) -> str:

	"""Return ``target`` itself, or a generated filename inside it when it is a directory."""

	if os.path.isdir(target) or target.endswith(os.sep):
		os.makedirs(target, exist_ok=True)
		return os.path.join(target, backbeat.midi_export.generate_filename(pattern, kit_style) + ".mid")

	return target


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the backbeat command.
	"""

	parser = build_parser()
	args = parser.parse_args(argv)

	config = load_config(args.config)
	output = config.get('output', {}) or {}

	settings = resolve_settings(config, args)

	try:
		settings.validate()
	except ValueError as e:
		parser.error(str(e))

	seed = args.seed if args.seed is not None else config.get('seed')

	pattern = backbeat.generator.generate(settings, seed=seed)
	logger.info(f"Generated {settings.kit_style} pattern with {len(pattern.hits)} hits ({pattern.duration_seconds:.2f}s)")

	show_grid = args.grid if args.grid is not None else output.get('grid', True)
	if show_grid:
		print("\n".join(backbeat.display.render_grid(pattern, title=settings.kit_style)))

	midi_target = args.midi or output.get('midi')
	if midi_target:
		backbeat.midi_export.save_midi(pattern, resolve_midi_path(str(midi_target), pattern, settings.kit_style))

	return 0


if __name__ == "__main__":
	sys.exit(main())
