"""Humanization and quantization of drum hits.

``humanize()`` adds small, bounded random variation to every hit's timing and
velocity - the imperfections that separate a played part from a perfectly
programmed one. ``quantize()`` does the opposite and snaps hits back to a grid.
"""

import dataclasses
import random
import typing

import backbeat.constants.durations as dur
import backbeat.constants.velocity
import backbeat.pattern


# Timing bound at full variation: 15 ms at a 120 BPM reference, in beats.
# The bound is not rescaled for the pattern's actual tempo.
MAX_TIMING_OFFSET = 0.03

# Velocity bound at full variation (normalised velocity units).
MAX_VELOCITY_OFFSET = 0.15


def humanize (
	hits: typing.Iterable[backbeat.pattern.DrumHit],
	timing_variation: float = 0.5,
	velocity_variation: float = 0.5,
	enabled: bool = True,
	rng: typing.Optional[random.Random] = None
) -> typing.List[backbeat.pattern.DrumHit]:

	"""
	Apply independent random timing and velocity offsets to each hit.

	Each hit moves by up to ``±0.03 * timing_variation`` beats and its velocity
	by up to ``±0.15 * velocity_variation``. Times are floored at zero and
	velocities clamped to 0.1-1.0, so template velocities below 0.1 are lifted.

	Parameters:
		hits: Hits to process; they are not modified.
		timing_variation: 0.0-1.0 share of the maximum timing offset.
		velocity_variation: 0.0-1.0 share of the maximum velocity offset.
		enabled: When False the hits are returned unchanged.
		rng: Random source. A fresh unseeded ``Random`` when omitted.
	"""

	if not enabled:
		return list(hits)

	if not 0.0 <= timing_variation <= 1.0:
		raise ValueError("Timing variation must be between 0.0 and 1.0")

	if not 0.0 <= velocity_variation <= 1.0:
		raise ValueError("Velocity variation must be between 0.0 and 1.0")

	if rng is None:
		rng = random.Random()

	max_timing = MAX_TIMING_OFFSET * timing_variation
	max_velocity = MAX_VELOCITY_OFFSET * velocity_variation

	humanized: typing.List[backbeat.pattern.DrumHit] = []

	for hit in hits:

		timing_offset = rng.uniform(-max_timing, max_timing)
		velocity_offset = rng.uniform(-max_velocity, max_velocity)

		humanized.append(dataclasses.replace(
			hit,
			time = max(0.0, hit.time + timing_offset),
			velocity = clamp_velocity(hit.velocity + velocity_offset)
		))

	return humanized


def clamp_velocity (velocity: float) -> float:

	"""Clamp a velocity into the humanized hit range (0.1-1.0)."""

	return max(backbeat.constants.velocity.MIN_HIT_VELOCITY, min(backbeat.constants.velocity.MAX_HIT_VELOCITY, velocity))


def quantize (hits: typing.Iterable[backbeat.pattern.DrumHit], grid: float = dur.SIXTEENTH) -> typing.List[backbeat.pattern.DrumHit]:

	"""
	Snap every hit to the nearest multiple of ``grid`` beats.

	Useful after humanization when a strictly programmed feel is wanted
	(e.g. for display or step-sequencer export). Velocities are untouched.
	"""

	if grid <= 0:
		raise ValueError("Grid must be positive")

	return [dataclasses.replace(hit, time=round(hit.time / grid) * grid) for hit in hits]
