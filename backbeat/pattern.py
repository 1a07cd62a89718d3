"""Drum hit and pattern value types.

A ``Pattern`` is the product of one generation call. It holds an ordered tuple
of ``DrumHit`` values plus the tempo and meter needed to turn beat positions
into wall-clock time. Both types are frozen: processing stages build new hits
with ``dataclasses.replace`` and the generator builds a new ``Pattern`` on every
call rather than patching an old one.
"""

import collections
import dataclasses
import typing

import backbeat.time_signature


@dataclasses.dataclass(frozen=True)
class DrumHit:

	"""
	A single scheduled drum event.

	Attributes:
		drum: Voice name from ``backbeat.constants.gm_drums.DRUM_VOICES``.
		time: Position in beats from the start of the pattern.
		velocity: Normalised strike strength (0.0-1.0).
		duration: Length in beats.
	"""

	drum: str
	time: float
	velocity: float
	duration: float


@dataclasses.dataclass(frozen=True)
class PatternInfo:

	"""Summary statistics for a generated pattern."""

	duration_seconds: float
	total_hits: int
	hit_counts: typing.Dict[str, int]
	bars: int


@dataclasses.dataclass(frozen=True)
class Pattern:

	"""
	An immutable, time-ordered drum pattern.

	Attributes:
		hits: Hits sorted ascending by ``time`` with no duplicate
			``(drum, millisecond-rounded time)`` pairs.
		length_in_beats: ``bars * beats_per_bar(time_signature)``.
		time_signature: Meter tag, e.g. ``"4/4"``.
		bpm: Tempo in beats per minute.
	"""

	hits: typing.Tuple[DrumHit, ...]
	length_in_beats: float
	time_signature: str
	bpm: int

	@property
	def seconds_per_beat (self) -> float:

		"""Wall-clock length of one beat at this pattern's tempo."""

		return 60.0 / self.bpm

	@property
	def duration_seconds (self) -> float:

		"""Wall-clock length of the whole pattern."""

		return self.length_in_beats * self.seconds_per_beat

	@property
	def bars (self) -> int:

		"""Number of bars the pattern spans."""

		return int(round(self.length_in_beats / backbeat.time_signature.beats_per_bar(self.time_signature)))

	def hits_for (self, drum: str) -> typing.List[DrumHit]:

		"""Return the hits for one voice, in time order."""

		return [hit for hit in self.hits if hit.drum == drum]


def pattern_info (pattern: Pattern) -> PatternInfo:

	"""Count hits per voice and compute the pattern's length in seconds and bars."""

	hit_counts: typing.Dict[str, int] = dict(collections.Counter(hit.drum for hit in pattern.hits))

	return PatternInfo(
		duration_seconds = pattern.duration_seconds,
		total_hits = len(pattern.hits),
		hit_counts = hit_counts,
		bars = pattern.bars
	)
