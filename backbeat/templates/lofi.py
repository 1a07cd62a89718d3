"""Lo-fi template - a softer, sparser cousin of the jazz pattern.

A gently varied ride keeps swung time. The kick is sparse and placed on swung
positions that open up with complexity, the snare leans on ghost notes around
soft backbeats, and the hi-hat only marks 2 and 4 with the foot plus the odd
open-hat texture. Nothing here is meant to be the loudest thing in the mix.
"""

import dataclasses
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
chance = backbeat.sequence_utils.chance


VELOCITY_LOW = 0.45
VELOCITY_RANGE = 0.3

# Swung ride upbeats after every beat, each kept with probability 0.85.
# Velocity scales apply to the ride level (base velocity * 0.6).
RIDE_UPBEATS: typing.Tuple[Ornament, ...] = tuple(
	Ornament(gm_drums.RIDE, beat + dur.SWUNG_UPBEAT, chance(0.85), velocity=0.65, duration=0.2)
	for beat in range(6)
)

# Optional kicks per complexity tier. Velocity scales apply to the kick level
# (base velocity * 0.7).
SPARSE_KICKS: typing.Tuple[Ornament, ...] = (
	Ornament(gm_drums.KICK, 2.0, chance(0.6), velocity=0.5, duration=0.2),
)

BUSY_KICKS: typing.Tuple[Ornament, ...] = (
	Ornament(gm_drums.KICK, 3 + dur.SWUNG_DOWNBEAT, chance(0.5), velocity=0.5, duration=0.2),
)

# Ghost snares, probability base * (0.5 + 0.8 * complexity). Velocity scales
# apply to the snare level (base velocity * 0.75).
GHOSTS: typing.Tuple[Ornament, ...] = (
	Ornament(gm_drums.SNARE, dur.SWUNG_UPBEAT, scaled(0.4, 0.5, 0.8), velocity=0.25, duration=0.08),
	Ornament(gm_drums.SNARE, 1 + dur.SWUNG_UPBEAT, scaled(0.5, 0.5, 0.8), velocity=0.3, duration=0.08),
	Ornament(gm_drums.SNARE, 2 + dur.SWUNG_DOWNBEAT, scaled(0.35, 0.5, 0.8), velocity=0.22, duration=0.08),
	Ornament(gm_drums.SNARE, 2 + dur.SWUNG_UPBEAT, scaled(0.45, 0.5, 0.8), velocity=0.28, duration=0.08),
	Ornament(gm_drums.SNARE, 3 + dur.SWUNG_UPBEAT, scaled(0.4, 0.5, 0.8), velocity=0.25, duration=0.08),
)

# The single ghost kept in three-beat meters.
WALTZ_GHOST = Ornament(gm_drums.SNARE, dur.SWUNG_UPBEAT, chance(0.4), velocity=0.25, duration=0.08)

# One open hat in some bars above complexity 0.5, on the swung "and" of 2 or 4.
# Velocity scales apply to the hi-hat level (base velocity * 0.5).
OPEN_HAT = Ornament(gm_drums.HIHAT_OPEN, 3 + dur.SWUNG_UPBEAT, chance(0.25), velocity=0.4, duration=0.12)
OPEN_HAT_POSITIONS: typing.Tuple[float, ...] = (3 + dur.SWUNG_UPBEAT, 1 + dur.SWUNG_UPBEAT)


def generate (bars: int, time_signature: str, complexity: float, dynamics: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	"""Build the raw lo-fi hits for ``bars`` bars."""

	hits: typing.List[backbeat.pattern.DrumHit] = []
	beats_per_bar = backbeat.time_signature.beats_per_bar(time_signature)
	base_velocity = VELOCITY_LOW + dynamics * VELOCITY_RANGE

	for bar in range(bars):

		bar_offset = bar * beats_per_bar

		hits.extend(_ride(bar_offset, beats_per_bar, complexity, base_velocity, rng))
		hits.extend(_kick(bar_offset, beats_per_bar, complexity, base_velocity, rng))
		hits.extend(_snare(bar_offset, beats_per_bar, complexity, base_velocity, rng))
		hits.extend(_hihat(bar_offset, beats_per_bar, complexity, base_velocity, rng))

	return hits


def _ride (bar_offset: float, beats_per_bar: float, complexity: float, velocity: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	ride_velocity = velocity * 0.6

	hits = [
		backbeat.pattern.DrumHit(gm_drums.RIDE, bar_offset + beat, ride_velocity * rng.uniform(0.85, 1.0), 0.3)
		for beat in range(math.ceil(beats_per_bar))
	]

	# Sparse settings keep only the upbeats after beats 1, 3 and 5
	upbeats = RIDE_UPBEATS if complexity > 0.2 else RIDE_UPBEATS[::2]
	hits.extend(backbeat.sequence_utils.place_ornaments(upbeats, bar_offset, beats_per_bar, complexity, ride_velocity, rng))

	return hits


def _kick (bar_offset: float, beats_per_bar: float, complexity: float, velocity: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	"""Soft, sparse kick whose placement is tiered by complexity."""

	kick_velocity = velocity * 0.7

	if beats_per_bar == 3:
		return [backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset, kick_velocity * 0.7, 0.25)]

	if beats_per_bar < 4:
		return []

	hits = [backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset, kick_velocity * 0.8, 0.25)]

	if complexity < 0.4:
		hits.extend(backbeat.sequence_utils.place_ornaments(SPARSE_KICKS, bar_offset, beats_per_bar, complexity, kick_velocity, rng))

	elif complexity < 0.7:
		# Swung "and" of 2
		hits.append(backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset + 1 + dur.SWUNG_UPBEAT, kick_velocity * 0.6, 0.2))

	else:
		hits.append(backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset + 1 + dur.SWUNG_UPBEAT, kick_velocity * 0.55, 0.2))
		hits.extend(backbeat.sequence_utils.place_ornaments(BUSY_KICKS, bar_offset, beats_per_bar, complexity, kick_velocity, rng))

	return hits


def _snare (bar_offset: float, beats_per_bar: float, complexity: float, velocity: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	snare_velocity = velocity * 0.75

	if beats_per_bar >= 4:
		hits = [
			backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 1, snare_velocity * 0.7, 0.15),
			backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 3, snare_velocity * 0.75, 0.15),
		]
		hits.extend(backbeat.sequence_utils.place_ornaments(GHOSTS, bar_offset, beats_per_bar, complexity, snare_velocity, rng))
		return hits

	if beats_per_bar == 3:
		hits = [backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 1, snare_velocity * 0.7, 0.15)]
		hits.extend(backbeat.sequence_utils.place_ornaments((WALTZ_GHOST,), bar_offset, beats_per_bar, complexity, snare_velocity, rng))
		return hits

	return []


def _hihat (bar_offset: float, beats_per_bar: float, complexity: float, velocity: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	"""Foot-closed hat on 2 and 4 and a rare open hat - never the timekeeper."""

	if beats_per_bar < 4:
		return []

	hihat_velocity = velocity * 0.5

	hits = [
		backbeat.pattern.DrumHit(gm_drums.HIHAT_CLOSED, bar_offset + 1, hihat_velocity * 0.5, 0.08),
		backbeat.pattern.DrumHit(gm_drums.HIHAT_CLOSED, bar_offset + 3, hihat_velocity * 0.5, 0.08),
	]

	if complexity > 0.5:
		open_hat = dataclasses.replace(OPEN_HAT, position=rng.choice(OPEN_HAT_POSITIONS))
		hits.extend(backbeat.sequence_utils.place_ornaments((open_hat,), bar_offset, beats_per_bar, complexity, hihat_velocity, rng))

	return hits
