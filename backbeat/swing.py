"""Swing timing for drum hits.

Swing pushes straight offbeat eighths late, toward the triplet position two
thirds of the way through the beat. Hits that are not near an offbeat pass
through unchanged, so triplet-written parts (ride upbeats at 0.67) are left
alone.
"""

import dataclasses
import typing

import backbeat.constants.durations as dur
import backbeat.pattern


# Offbeats within this many beats of x.5 are swung.
OFFBEAT_WINDOW = 0.1

# Distance from the straight offbeat to the triplet position (0.67 - 0.5).
TRIPLET_SHIFT = 0.17


def is_offbeat (time: float) -> bool:

	"""True when ``time`` sits within ``OFFBEAT_WINDOW`` of a straight eighth offbeat."""

	return abs(time % 1 - dur.EIGHTH) < OFFBEAT_WINDOW


def apply_swing (hits: typing.Iterable[backbeat.pattern.DrumHit], amount: float = 0.5) -> typing.List[backbeat.pattern.DrumHit]:

	"""
	Delay offbeat hits toward the triplet position.

	Parameters:
		hits: Hits to process; they are not modified.
		amount: 0.0 leaves timing straight, 1.0 moves offbeats all the way to
			the triplet position (``0.17 * amount`` beats later).

	Returns:
		A new list in the same order as the input.
	"""

	if not 0.0 <= amount <= 1.0:
		raise ValueError("Swing amount must be between 0.0 and 1.0")

	offset = TRIPLET_SHIFT * amount
	swung: typing.List[backbeat.pattern.DrumHit] = []

	for hit in hits:

		if is_offbeat(hit.time):
			swung.append(dataclasses.replace(hit, time=hit.time + offset))
		else:
			swung.append(hit)

	return swung
