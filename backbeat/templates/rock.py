"""Rock template - straight, driving time on hi-hat with a kick/snare backbeat.

Structure per bar:

- Kick on beat 1, plus beat 3 in meters of four beats or more. Syncopated
  kicks on the "and" of 2 (complexity > 0.5) and the "and" of 4 (> 0.7).
- Snare backbeat on 2 and 4, ghost notes on the "and" of 1 and 3 above 0.6.
- Hi-hat subdivision follows complexity: quarters, then eighths, then
  sixteenths. Off-eighths may open up when dynamics are high.
- Every fourth bar is a fill bar above complexity 0.6: no hi-hat, a
  descending snare-to-floor-tom fill on the last beat, and a crash on the
  next downbeat.
- Ride on the beat replaces some of the drive in quiet, busier settings.
"""

import math
import random
import typing

import backbeat.constants.durations as dur
import backbeat.constants.gm_drums as gm_drums
import backbeat.pattern
import backbeat.sequence_utils
import backbeat.time_signature


VELOCITY_LOW = 0.5
VELOCITY_RANGE = 0.4

FILL_THRESHOLD = 0.6
EXTENDED_FILL_THRESHOLD = 0.8
CRASH_AFTER_FILL_THRESHOLD = 0.5
OPEN_HAT_THRESHOLD = 0.7

# Open hats on the eighth offbeats at high dynamics, each with probability 0.3.
OPEN_HATS: typing.Tuple[backbeat.sequence_utils.Ornament, ...] = tuple(
	backbeat.sequence_utils.Ornament(gm_drums.HIHAT_OPEN, beat + dur.EIGHTH, backbeat.sequence_utils.chance(0.3), velocity=0.7, duration=0.25)
	for beat in range(6)
)

# Sixteenth-note descent over the last beat of a fill bar.
FILL_NOTES: typing.Tuple[typing.Tuple[str, float], ...] = (
	(gm_drums.SNARE, 0.0),
	(gm_drums.TOM_HIGH, 0.25),
	(gm_drums.TOM_MID, 0.5),
	(gm_drums.TOM_LOW, 0.75),
)

# Lead-in played on the beat before the fill at the highest complexity.
EXTENDED_FILL_NOTES: typing.Tuple[typing.Tuple[str, float, float], ...] = (
	(gm_drums.SNARE, -1.0, 1.0),
	(gm_drums.SNARE, -0.75, 0.9),
	(gm_drums.TOM_HIGH, -0.5, 1.0),
	(gm_drums.TOM_HIGH, -0.25, 0.9),
)


def generate (bars: int, time_signature: str, complexity: float, dynamics: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	"""Build the raw rock hits for ``bars`` bars."""

	hits: typing.List[backbeat.pattern.DrumHit] = []
	beats_per_bar = backbeat.time_signature.beats_per_bar(time_signature)
	base_velocity = VELOCITY_LOW + dynamics * VELOCITY_RANGE

	for bar in range(bars):

		bar_offset = bar * beats_per_bar
		is_fill_bar = complexity > FILL_THRESHOLD and (bar + 1) % 4 == 0

		hits.extend(_kick(bar_offset, beats_per_bar, complexity, base_velocity))
		hits.extend(_snare(bar_offset, beats_per_bar, complexity, base_velocity, is_fill_bar))

		if not is_fill_bar:
			hits.extend(_hihat(bar_offset, beats_per_bar, complexity, dynamics, base_velocity, rng))

		# Crash on the first downbeat and on the downbeat after each fill bar
		if bar == 0 or (complexity > CRASH_AFTER_FILL_THRESHOLD and bar % 4 == 0):
			hits.append(backbeat.pattern.DrumHit(gm_drums.CRASH, bar_offset, base_velocity * 0.9, 0.5))

		if is_fill_bar:
			hits.extend(_fill(bar_offset, beats_per_bar, complexity, base_velocity))

		if dynamics < 0.3 and complexity > 0.4:
			hits.extend(_ride(bar_offset, beats_per_bar, base_velocity * 0.7))

	return hits


def _kick (bar_offset: float, beats_per_bar: float, complexity: float, velocity: float) -> typing.List[backbeat.pattern.DrumHit]:

	hits = [backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset, velocity, 0.25)]

	if beats_per_bar >= 4:

		hits.append(backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset + 2, velocity * 0.95, 0.25))

		if complexity > 0.5:
			hits.append(backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset + 1.5, velocity * 0.8, 0.25))

		if complexity > 0.7:
			hits.append(backbeat.pattern.DrumHit(gm_drums.KICK, bar_offset + 3.5, velocity * 0.75, 0.25))

	return hits


def _snare (bar_offset: float, beats_per_bar: float, complexity: float, velocity: float, is_fill_bar: bool) -> typing.List[backbeat.pattern.DrumHit]:

	hits: typing.List[backbeat.pattern.DrumHit] = []

	if beats_per_bar >= 4:

		hits.append(backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 1, velocity, 0.25))

		# The fill takes over beat 4
		if not is_fill_bar:
			hits.append(backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 3, velocity, 0.25))

		if complexity > 0.6:
			hits.append(backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 0.5, velocity * 0.3, dur.THIRTYSECOND))
			hits.append(backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 2.5, velocity * 0.3, dur.THIRTYSECOND))

	elif beats_per_bar == 3:
		hits.append(backbeat.pattern.DrumHit(gm_drums.SNARE, bar_offset + 1, velocity, 0.25))

	return hits


def _hihat (bar_offset: float, beats_per_bar: float, complexity: float, dynamics: float, velocity: float, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	"""Closed hi-hat grid whose resolution rises with complexity."""

	if complexity < 0.3:
		subdivision = dur.QUARTER
	elif complexity < 0.6:
		subdivision = dur.EIGHTH
	else:
		subdivision = dur.SIXTEENTH

	hits: typing.List[backbeat.pattern.DrumHit] = []

	# Open hats replace closed ones on the eighth offbeats, which quarters never reach
	if dynamics > OPEN_HAT_THRESHOLD and subdivision <= dur.EIGHTH:
		hits.extend(backbeat.sequence_utils.place_ornaments(OPEN_HATS, bar_offset, beats_per_bar, complexity, velocity, rng))

	opened = {hit.time for hit in hits}
	steps = math.ceil(beats_per_bar / subdivision)

	for i in range(steps):

		time = bar_offset + i * subdivision

		if time in opened:
			continue

		is_on_beat = (i * subdivision) % 1 == 0

		hits.append(backbeat.pattern.DrumHit(gm_drums.HIHAT_CLOSED, time, velocity * (1.0 if is_on_beat else 0.7), dur.THIRTYSECOND))

	return hits


def _ride (bar_offset: float, beats_per_bar: float, velocity: float) -> typing.List[backbeat.pattern.DrumHit]:

	return [
		backbeat.pattern.DrumHit(gm_drums.RIDE, bar_offset + beat, velocity, 0.5)
		for beat in range(math.ceil(beats_per_bar))
	]


def _fill (bar_offset: float, beats_per_bar: float, complexity: float, velocity: float) -> typing.List[backbeat.pattern.DrumHit]:

	"""Descending tom fill on the last beat, extended a beat earlier when busy."""

	hits: typing.List[backbeat.pattern.DrumHit] = []
	fill_start = bar_offset + beats_per_bar - 1

	if complexity > EXTENDED_FILL_THRESHOLD:
		for drum, offset, scale in EXTENDED_FILL_NOTES:
			hits.append(backbeat.pattern.DrumHit(drum, fill_start + offset, velocity * scale, 0.25))

	for drum, offset in FILL_NOTES:
		hits.append(backbeat.pattern.DrumHit(drum, fill_start + offset, velocity * (1 - offset * 0.1), 0.25))

	return hits
