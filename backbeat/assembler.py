"""Sort and deduplicate raw hits into pattern order.

Templates may emit the same drum twice at (nearly) the same moment, for
example a ride bell accent stacked on a ride beat. Assembly keeps one hit per
``(drum, millisecond-rounded time)`` key - the loudest - and returns the
survivors in time order. Stored times are not rounded; the rounding only
decides which hits collide.
"""

import typing

import backbeat.pattern


# Time resolution for collision detection (1/1000 of a beat).
DEDUP_RESOLUTION = 1000


def dedup_key (hit: backbeat.pattern.DrumHit) -> typing.Tuple[str, int]:

	"""The ``(drum, rounded time)`` key two hits must share to collide."""

	return hit.drum, round(hit.time * DEDUP_RESOLUTION)


def assemble (hits: typing.Iterable[backbeat.pattern.DrumHit]) -> typing.List[backbeat.pattern.DrumHit]:

	"""
	Sort by time and keep the highest-velocity hit per collision key.

	When two colliding hits have equal velocity the earlier one in time order
	is kept. Applying ``assemble()`` to its own output returns the same list.
	"""

	ordered = sorted(hits, key=lambda hit: hit.time)
	kept: typing.Dict[typing.Tuple[str, int], backbeat.pattern.DrumHit] = {}

	for hit in ordered:

		key = dedup_key(hit)
		existing = kept.get(key)

		if existing is None or hit.velocity > existing.velocity:
			kept[key] = hit

	return sorted(kept.values(), key=lambda hit: hit.time)
