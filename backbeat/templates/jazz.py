"""Jazz template - ride-led swing with feathered kick and conversational snare.

The ride carries the time on every beat plus the triplet upbeat. The hi-hat
foot closes on 2 and 4, the kick feathers quietly underneath, and the snare
comps at swung upbeats with independent probabilities. Four-bar phrases end
with a light fill and a crash on the following downbeat.
"""

import math
import random
import typing

import backbeat.constants.durations as dur
import backbeat.constants.gm_drums as gm_drums
import backbeat.pattern
import backbeat.sequence_utils
import backbeat.time_signature

Ornament = backbeat.sequence_utils.Ornament
scaled = backbeat.sequence_utils.scaled


VELOCITY_LOW = 0.4
VELOCITY_RANGE = 0.4

COMPING_THRESHOLD = 0.3
PHRASE_FILL_THRESHOLD = 0.5

# Snare comping: each position plays with probability base * complexity.
COMPING: typing.Tuple[Ornament, ...] = (
	Ornament(gm_drums.SNARE, dur.SWUNG_UPBEAT, scaled(0.2), velocity=(0.4, 0.7), duration=0.15),
	Ornament(gm_drums.SNARE, 1 + dur.SWUNG_UPBEAT, scaled(0.3), velocity=(0.4, 0.7), duration=0.15),
	Ornament(gm_drums.SNARE, 2.0, scaled(0.15), velocity=(0.4, 0.7), duration=0.15),
	Ornament(gm_drums.SNARE, 2 + dur.SWUNG_UPBEAT, scaled(0.25), velocity=(0.4, 0.7), duration=0.15),
	Ornament(gm_drums.SNARE, 3.5, scaled(0.2), velocity=(0.4, 0.7), duration=0.15),
)

# Above 0.5 one feathered kick per bar is accented, on beat 1 or beat 3.
KICK_ACCENT_BEATS: typing.Tuple[int, ...] = (0, 2)

# Bell accent on the downbeat, slightly louder than the ride pattern.
BELL_ACCENT = Ornament(gm_drums.RIDE, 0.0, scaled(0.3), velocity=1.1, duration=0.3)


def generate (bars: int, time_signature: str, complexity: float, dynamics: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	"""Build the raw jazz hits for ``bars`` bars."""

	hits: typing.List[backbeat.pattern.DrumHit] = []
	beats_per_bar = backbeat.time_signature.beats_per_bar(time_signature)
	base_velocity = VELOCITY_LOW + dynamics * VELOCITY_RANGE

	for bar in range(bars):

		bar_offset = bar * beats_per_bar
		is_phrase_end = (bar + 1) % 4 == 0

		hits.extend(_ride(bar_offset, beats_per_bar, complexity, base_velocity, rng))
		hits.extend(_hihat_foot(bar_offset, beats_per_bar, base_velocity))
		hits.extend(_feathered_kick(bar_offset, beats_per_bar, complexity, dynamics, base_velocity, rng))

		if complexity >= COMPING_THRESHOLD:
			hits.extend(backbeat.sequence_utils.place_ornaments(COMPING, bar_offset, beats_per_bar, complexity, base_velocity, rng))

		if is_phrase_end and complexity > PHRASE_FILL_THRESHOLD:
			hits.extend(_phrase_fill(bar_offset, beats_per_bar, complexity, base_velocity))

	return hits


def _ride (bar_offset: float, beats_per_bar: float, complexity: float, velocity: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	"""Ride on each beat plus the triplet upbeat - the backbone of the groove."""

	hits: typing.List[backbeat.pattern.DrumHit] = []

	for beat in range(math.ceil(beats_per_bar)):

		hits.append(backbeat.pattern.DrumHit(gm_drums.RIDE, bar_offset + beat, velocity, 0.3))

		# Sparse settings keep only the upbeats after beats 1 and 3
		if complexity > 0.2 or beat % 2 == 0:
			hits.append(backbeat.pattern.DrumHit(gm_drums.RIDE, bar_offset + beat + dur.SWUNG_UPBEAT, velocity * 0.75, 0.2))

	hits.extend(backbeat.sequence_utils.place_ornaments((BELL_ACCENT,), bar_offset, beats_per_bar, complexity, velocity, rng))

	return hits


def _hihat_foot (bar_offset: float, beats_per_bar: float, velocity: float) -> typing.List[backbeat.pattern.DrumHit]:

	if beats_per_bar >= 4:
		beats = (1, 3)
	elif beats_per_bar == 3:
		beats = (1,)
	else:
		beats = ()

	return [backbeat.pattern.DrumHit(gm_drums.HIHAT_CLOSED, bar_offset + beat, velocity * 0.6, 0.1) for beat in beats]


def _feathered_kick (bar_offset: float, beats_per_bar: float, complexity: float, dynamics: float, velocity: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	"""Barely-audible kick on every beat, with an occasional accent on 1 or 3."""

	hits: typing.List[backbeat.pattern.DrumHit] = []

	if dynamics > 0.3:
		for beat in range(math.ceil(beats_per_bar)):
			hits.append(backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset + beat, velocity * 0.3, 0.2))

	if complexity > 0.5:
		accent_beat = rng.choice(KICK_ACCENT_BEATS)
		if accent_beat < beats_per_bar:
			hits.append(backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset + accent_beat, velocity * 0.6, 0.25))

	return hits


def _phrase_fill (bar_offset: float, beats_per_bar: float, complexity: float, velocity: float) -> typing.List[backbeat.pattern.DrumHit]:

	"""Subtle snare figure on the last beat and a crash into the next phrase."""

	fill_start = bar_offset + beats_per_bar - 1

	if complexity > 0.7:
		hits = [
			backbeat.pattern.DrumHit(gm_drums.SNARE, fill_start, velocity * 0.7, 0.15),
			backbeat.pattern.DrumHit(gm_drums.SNARE, fill_start + dur.SWUNG_DOWNBEAT, velocity * 0.8, 0.15),
			backbeat.pattern.DrumHit(gm_drums.SNARE, fill_start + dur.SWUNG_UPBEAT, velocity * 0.9, 0.15),
		]
	else:
		hits = [backbeat.pattern.DrumHit(gm_drums.SNARE, fill_start + 0.5, velocity * 0.8, 0.2)]

	hits.append(backbeat.pattern.DrumHit(gm_drums.CRASH, bar_offset + beats_per_bar, velocity * 0.7, 0.5))

	return hits
