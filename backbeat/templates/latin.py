"""Latin template - clave-aware kick and snare with cascara and bell layers.

Bars alternate between the two sides of the clave by parity: even bars play
the "3-side" phrasing and odd bars the "2-side". Kick, cross-stick snare and
the cascara tom figure all change with the side. A steady eighth-note cymbal
runs underneath on ride (loud) or closed hi-hat (soft).
"""

import random
import typing

import backbeat.constants.durations as dur
import backbeat.constants.gm_drums as gm_drums
import backbeat.pattern
import backbeat.sequence_utils
import backbeat.time_signature

Ornament = backbeat.sequence_utils.Ornament
rising = backbeat.sequence_utils.rising


VELOCITY_LOW = 0.55
VELOCITY_RANGE = 0.35

THREE_SIDE = 0
TWO_SIDE = 1

CASCARA_THRESHOLD = 0.4
BELL_THRESHOLD = 0.3

# Kick phrasing per clave side: (position, velocity scale, complexity threshold or None).
KICKS: typing.Dict[int, typing.Tuple[typing.Tuple[float, float, typing.Optional[float]], ...]] = {
	THREE_SIDE: ((0.0, 1.0, None), (2.5, 0.9, None), (3.5, 0.85, 0.5)),
	TWO_SIDE: ((0.5, 0.9, None), (2.0, 1.0, None), (3.0, 0.85, 0.5)),
}

# Cross-stick phrasing per clave side: (position, velocity scale).
CROSS_STICKS: typing.Dict[int, typing.Tuple[typing.Tuple[float, float], ...]] = {
	THREE_SIDE: ((1.0, 1.0), (2.0, 0.9), (3.0, 1.0)),
	TWO_SIDE: ((1.0, 1.0), (3.0, 1.0)),
}

# Cascara on the toms: high tom on the beat, mid tom in between.
CASCARA_POSITIONS: typing.Dict[int, typing.Tuple[float, ...]] = {
	THREE_SIDE: (0.0, 0.5, 1.0, 1.5, 2.5, 3.0, 3.5),
	TWO_SIDE: (0.0, 0.5, 1.5, 2.0, 2.5, 3.5),
}

CASCARA: typing.Dict[int, typing.Tuple[Ornament, ...]] = {
	side: tuple(
		Ornament(
			gm_drums.TOM_HIGH if position % 1 == 0 else gm_drums.TOM_MID,
			position,
			rising(0.5, 0.5),
			velocity = 0.6,
			duration = 0.15
		)
		for position in positions
	)
	for side, positions in CASCARA_POSITIONS.items()
}

# Bell accents, voiced as a soft crash in place of a cowbell.
BELLS: typing.Tuple[Ornament, ...] = tuple(
	Ornament(gm_drums.CRASH, position, rising(0.5, 0.3), velocity=0.5, duration=0.2)
	for position in (0.0, 1.5, 2.0, 3.5)
)


def clave_side (bar: int) -> int:

	"""``THREE_SIDE`` for even bar indices, ``TWO_SIDE`` for odd ones."""

	return bar % 2


def generate (bars: int, time_signature: str, complexity: float, dynamics: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	"""Build the raw latin hits for ``bars`` bars."""

	hits: typing.List[backbeat.pattern.DrumHit] = []
	beats_per_bar = backbeat.time_signature.beats_per_bar(time_signature)
	base_velocity = VELOCITY_LOW + dynamics * VELOCITY_RANGE

	for bar in range(bars):

		bar_offset = bar * beats_per_bar
		side = clave_side(bar)

		hits.extend(_kick(bar_offset, beats_per_bar, side, complexity, base_velocity))
		hits.extend(_snare(bar_offset, beats_per_bar, side, complexity, base_velocity))
		hits.extend(_cymbal(bar_offset, beats_per_bar, dynamics, base_velocity))

		if complexity > CASCARA_THRESHOLD and beats_per_bar >= 4:
			hits.extend(backbeat.sequence_utils.place_ornaments(CASCARA[side], bar_offset, beats_per_bar, complexity, base_velocity, rng))

		if complexity > BELL_THRESHOLD:
			hits.extend(backbeat.sequence_utils.place_ornaments(BELLS, bar_offset, beats_per_bar, complexity, base_velocity, rng))

	return hits


def _kick (bar_offset: float, beats_per_bar: float, side: int, complexity: float, velocity: float) -> typing.List[backbeat.pattern.DrumHit]:

	"""Tumbao-style syncopated bass drum following the clave side."""

	if beats_per_bar >= 4:
		return [
			backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset + position, velocity * scale, 0.2)
			for position, scale, threshold in KICKS[side]
			if threshold is None or complexity > threshold
		]

	if beats_per_bar == 3:
		return [
			backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset, velocity, 0.2),
			backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset + 1.5, velocity * 0.85, 0.2),
		]

	return []


def _snare (bar_offset: float, beats_per_bar: float, side: int, complexity: float, velocity: float) -> typing.List[backbeat.pattern.DrumHit]:

	if beats_per_bar < 4:
		return []

	cross_velocity = velocity * 0.7

	hits = [
		backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + position, cross_velocity * scale, 0.15)
		for position, scale in CROSS_STICKS[side]
	]

	if complexity > 0.6:
		hits.append(backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 0.5, velocity * 0.3, 0.1))
		hits.append(backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 2.5, velocity * 0.3, 0.1))

	return hits


def _cymbal (bar_offset: float, beats_per_bar: float, dynamics: float, velocity: float) -> typing.List[backbeat.pattern.DrumHit]:

	"""Steady eighths on ride when loud, closed hi-hat when soft."""

	use_ride = dynamics > 0.5
	drum = gm_drums.RIDE if use_ride else gm_drums.HIHAT_CLOSED

	hits: typing.List[backbeat.pattern.DrumHit] = []

	for i in range(int(beats_per_bar * 2)):
		is_on_beat = i % 2 == 0
		hits.append(backbeat.pattern.DrumHit(drum, bar_offset + i * dur.EIGHTH, velocity * (0.8 if is_on_beat else 0.6), 0.2))

	return hits
