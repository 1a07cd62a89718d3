"""Generator input settings.

``GeneratorSettings`` is the single input record for pattern generation. It is
built by the caller (a CLI, a config file, a UI), consumed once by
``backbeat.generator.generate()`` and then discarded.

The generator itself never rejects settings: unknown styles fall back to rock
and unknown meters to 4/4. Callers that want strict checking call
``validate()`` first, which raises ``ValueError`` describing the first problem
found.
"""

import dataclasses
import logging
import typing

import backbeat.time_signature


logger = logging.getLogger(__name__)


ROCK = "rock"
JAZZ = "jazz"
ELECTRONIC = "electronic"
LATIN = "latin"
LOFI = "lofi"

KIT_STYLES: typing.Tuple[str, ...] = (ROCK, JAZZ, ELECTRONIC, LATIN, LOFI)

DEFAULT_KIT_STYLE = ROCK

MIN_BPM = 60
MAX_BPM = 200
BAR_OPTIONS: typing.Tuple[int, ...] = (1, 2, 4, 8)


def _is_int (value: typing.Any) -> bool:

	# bool is an int subclass but never a valid count or tempo
	return isinstance(value, int) and not isinstance(value, bool)


def _is_number (value: typing.Any) -> bool:

	return isinstance(value, (int, float)) and not isinstance(value, bool)


def resolve_style (kit_style: str) -> str:

	"""Return the style name if known, otherwise the rock default (with a warning)."""

	if kit_style in KIT_STYLES:
		return kit_style

	logger.warning("Unknown kit style %r - using %s", kit_style, DEFAULT_KIT_STYLE)
	return DEFAULT_KIT_STYLE


@dataclasses.dataclass
class GeneratorSettings:

	"""
	Musical parameters for one generation request.

	Attributes:
		kit_style: One of ``KIT_STYLES``.
		time_signature: One of ``backbeat.time_signature.TIME_SIGNATURES``.
		bpm: Tempo, 60-200.
		bars: Pattern length in bars, one of 1, 2, 4 or 8.
		complexity: 0.0 (sparse) to 1.0 (busy). Gates extra subdivisions,
			ghost notes and fills.
		dynamics: 0.0 (quiet) to 1.0 (loud). Scales base velocity and
			gates accents such as open hi-hats.

	Example:
		```python
		settings = GeneratorSettings(kit_style="jazz", bars=4, complexity=0.7)
		settings.validate()
		pattern = backbeat.generator.generate(settings, seed=42)
		```
	"""

	kit_style: str = DEFAULT_KIT_STYLE
	time_signature: str = backbeat.time_signature.DEFAULT_TIME_SIGNATURE
	bpm: int = 120
	bars: int = 4
	complexity: float = 0.5
	dynamics: float = 0.5

	def validate (self) -> None:

		"""
		Check every field and raise ``ValueError`` on the first invalid one.
		"""

		if self.kit_style not in KIT_STYLES:
			raise ValueError(f"Unknown kit style '{self.kit_style}' - expected one of {', '.join(KIT_STYLES)}")

		if self.time_signature not in backbeat.time_signature.TIME_SIGNATURES:
			raise ValueError(f"Unknown time signature '{self.time_signature}' - expected one of {', '.join(backbeat.time_signature.TIME_SIGNATURES)}")

		if not _is_int(self.bpm) or not MIN_BPM <= self.bpm <= MAX_BPM:
			raise ValueError(f"BPM must be a whole number between {MIN_BPM} and {MAX_BPM}, got {self.bpm!r}")

		if not _is_int(self.bars) or self.bars not in BAR_OPTIONS:
			raise ValueError(f"Bars must be one of {BAR_OPTIONS}, got {self.bars!r}")

		if not _is_number(self.complexity) or not 0.0 <= self.complexity <= 1.0:
			raise ValueError(f"Complexity must be a number between 0.0 and 1.0, got {self.complexity!r}")

		if not _is_number(self.dynamics) or not 0.0 <= self.dynamics <= 1.0:
			raise ValueError(f"Dynamics must be a number between 0.0 and 1.0, got {self.dynamics!r}")

	@classmethod
	def from_dict (cls, data: typing.Dict[str, typing.Any]) -> "GeneratorSettings":

		"""
		Build settings from a config mapping, ignoring unrecognised keys.

		Hyphenated keys (``kit-style``) are accepted alongside underscored ones.
		"""

		field_names = {field.name for field in dataclasses.fields(cls)}
		values: typing.Dict[str, typing.Any] = {}

		for key, value in data.items():
			name = str(key).replace("-", "_")
			if name in field_names:
				values[name] = value
			else:
				logger.warning("Ignoring unknown generator setting %r", key)

		return cls(**values)
