"""Electronic template - four-on-the-floor with a programmed sixteenth grid.

The kick lands on every beat and the snare/clap strictly on 2 and 4. A
sixteenth-note hi-hat grid carries velocity tiers by position, with off-eighth
open hats at higher dynamics. Above complexity 0.6 every eighth bar becomes a
breakdown: kick and backbeat drop out and a rising snare roll leads into a
crash on the next downbeat.
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


VELOCITY_LOW = 0.6
VELOCITY_RANGE = 0.35

BREAKDOWN_THRESHOLD = 0.6
BREAKDOWN_EVERY = 8

ROLL_STEPS = 16
ROLL_START_SCALE = 0.3

# Hi-hat velocity tiers by grid position.
TIER_ON_BEAT = 0.9
TIER_OFF_EIGHTH = 0.8
TIER_OFF_SIXTEENTH = 0.5

OPEN_HAT_THRESHOLD = 0.5

# Open hats replace the off-eighth hats at higher dynamics, each with probability 0.4.
OPEN_HATS: typing.Tuple[Ornament, ...] = tuple(
	Ornament(gm_drums.HIHAT_OPEN, beat + dur.EIGHTH, backbeat.sequence_utils.chance(0.4), velocity=TIER_OFF_EIGHTH, duration=0.2)
	for beat in range(6)
)

# Syncopated kicks layered over the four-on-the-floor.
KICK_PUSHES: typing.Tuple[typing.Tuple[float, float, float], ...] = (
	# (position, complexity threshold, velocity scale)
	(0.75, 0.6, 0.85),
	(2.5, 0.8, 0.8),
	(3.75, 0.8, 0.85),
)

# Ride texture on the "ands", each with probability 0.4 * complexity.
PERCUSSION: typing.Tuple[Ornament, ...] = tuple(
	Ornament(gm_drums.RIDE, position, scaled(0.4), velocity=0.5, duration=0.15)
	for position in (0.5, 1.5, 2.5, 3.5)
)


def generate (bars: int, time_signature: str, complexity: float, dynamics: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	"""Build the raw electronic hits for ``bars`` bars."""

	hits: typing.List[backbeat.pattern.DrumHit] = []
	beats_per_bar = backbeat.time_signature.beats_per_bar(time_signature)
	base_velocity = VELOCITY_LOW + dynamics * VELOCITY_RANGE

	for bar in range(bars):

		bar_offset = bar * beats_per_bar

		if is_breakdown_bar(bar, complexity):
			hits.extend(_hihats(bar_offset, beats_per_bar, complexity, dynamics, base_velocity, rng))
			hits.extend(_breakdown_roll(bar_offset, beats_per_bar, base_velocity))
			continue

		hits.extend(_kick(bar_offset, beats_per_bar, complexity, base_velocity))
		hits.extend(_snare(bar_offset, beats_per_bar, complexity, base_velocity))
		hits.extend(_hihats(bar_offset, beats_per_bar, complexity, dynamics, base_velocity, rng))

		if complexity > 0.5:
			hits.extend(backbeat.sequence_utils.place_ornaments(PERCUSSION, bar_offset, beats_per_bar, complexity, base_velocity, rng))

	return hits


def is_breakdown_bar (bar: int, complexity: float) -> bool:

	"""True for every eighth bar (index 7, 15, ...) once complexity passes the threshold."""

	return complexity > BREAKDOWN_THRESHOLD and (bar + 1) % BREAKDOWN_EVERY == 0


def _kick (bar_offset: float, beats_per_bar: float, complexity: float, velocity: float) -> typing.List[backbeat.pattern.DrumHit]:

	hits = [
		backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset + beat, velocity, 0.2)
		for beat in range(math.ceil(beats_per_bar))
	]

	for position, threshold, scale in KICK_PUSHES:
		if complexity > threshold and position < beats_per_bar:
			hits.append(backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset + position, velocity * scale, 0.15))

	return hits


def _snare (bar_offset: float, beats_per_bar: float, complexity: float, velocity: float) -> typing.List[backbeat.pattern.DrumHit]:

	if beats_per_bar < 4:
		return []

	hits = [
		backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 1, velocity, 0.2),
		backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 3, velocity, 0.2),
	]

	if complexity > 0.7:
		hits.append(backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 1.5, velocity * 0.5, 0.1))

	return hits


def _hihats (bar_offset: float, beats_per_bar: float, complexity: float, dynamics: float, velocity: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	"""Sixteenth grid thinned by complexity, accented by position."""

	hits: typing.List[backbeat.pattern.DrumHit] = []

	# Below 0.3 only on-beat hats remain, so there are no offbeats to open
	if dynamics > OPEN_HAT_THRESHOLD and complexity >= 0.3:
		hits.extend(backbeat.sequence_utils.place_ornaments(OPEN_HATS, bar_offset, beats_per_bar, complexity, velocity, rng))

	opened = {hit.time for hit in hits}
	steps = math.ceil(beats_per_bar / dur.SIXTEENTH)

	for i in range(steps):

		is_on_beat = i % 4 == 0
		is_eighth_offbeat = i % 4 == 2

		if complexity < 0.5 and not is_on_beat and not is_eighth_offbeat:
			continue

		if complexity < 0.3 and not is_on_beat:
			continue

		time = bar_offset + i * dur.SIXTEENTH

		if time in opened:
			continue

		if is_on_beat:
			tier = TIER_ON_BEAT
		elif is_eighth_offbeat:
			tier = TIER_OFF_EIGHTH
		else:
			tier = TIER_OFF_SIXTEENTH

		hits.append(backbeat.pattern.DrumHit(gm_drums.HIHAT_CLOSED, time, velocity * tier, 0.1))

	return hits


def _breakdown_roll (bar_offset: float, beats_per_bar: float, velocity: float) -> typing.List[backbeat.pattern.DrumHit]:

	"""
	Thirty-second-note snare roll over the last two beats, rising from 30% to
	full velocity, then a crash on the next bar's downbeat.
	"""

	roll_start = bar_offset + beats_per_bar - 2
	hits: typing.List[backbeat.pattern.DrumHit] = []

	for i in range(ROLL_STEPS):
		scale = ROLL_START_SCALE + (i / ROLL_STEPS) * (1.0 - ROLL_START_SCALE)
		hits.append(backbeat.pattern.DrumHit(gm_drums.SNARE, roll_start + i * dur.THIRTYSECOND, velocity * scale, 0.1))

	hits.append(backbeat.pattern.DrumHit(gm_drums.CRASH, bar_offset + beats_per_bar, velocity, 0.5))

	return hits
