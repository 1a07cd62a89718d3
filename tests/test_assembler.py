import random

import backbeat.assembler
import backbeat.constants.gm_drums as gm_drums
import backbeat.pattern


def _hit (drum: str, time: float, velocity: float = 0.8) -> backbeat.pattern.DrumHit:

	return backbeat.pattern.DrumHit(drum, time, velocity, 0.25)


def test_assemble_sorts_by_time () -> None:

	"""Output is in ascending time order regardless of input order."""

	hits = [_hit(gm_drums.SNARE, 3.0), _hit(gm_drums.KICK, 0.0), _hit(gm_drums.RIDE, 1.67)]

	result = backbeat.assembler.assemble(hits)

	assert [hit.time for hit in result] == [0.0, 1.67, 3.0]


def test_assemble_keeps_louder_duplicate () -> None:

	"""Two hits of the same drum at the same time collapse to the louder one."""

	hits = [_hit(gm_drums.RIDE, 0.0, 0.5), _hit(gm_drums.RIDE, 0.0, 0.9), _hit(gm_drums.RIDE, 0.0, 0.7)]

	result = backbeat.assembler.assemble(hits)

	assert len(result) == 1
	assert result[0].velocity == 0.9


def test_assemble_collides_within_a_millisecond_of_a_beat () -> None:

	"""Hits whose times round to the same thousandth of a beat collide; stored time is not rounded."""

	hits = [_hit(gm_drums.SNARE, 1.0001, 0.4), _hit(gm_drums.SNARE, 1.0003, 0.6)]

	result = backbeat.assembler.assemble(hits)

	assert len(result) == 1
	assert result[0].time == 1.0003


def test_assemble_keeps_distinct_drums_and_times () -> None:

	"""Different drums at one time, or one drum at different times, are all kept."""

	hits = [
		_hit(gm_drums.KICK, 0.0),
		_hit(gm_drums.CRASH, 0.0),
		_hit(gm_drums.HIHAT_CLOSED, 0.0),
		_hit(gm_drums.SNARE, 1.0),
		_hit(gm_drums.SNARE, 1.01),
	]

	assert len(backbeat.assembler.assemble(hits)) == 5


def test_assemble_empty () -> None:

	"""No hits in, no hits out."""

	assert backbeat.assembler.assemble([]) == []


def test_assemble_is_idempotent (rng: random.Random) -> None:

	"""Assembling an assembled list returns the same list."""

	hits = [
		_hit(rng.choice(gm_drums.DRUM_VOICES), rng.randint(0, 32) / 4 + rng.uniform(-0.002, 0.002), rng.uniform(0.1, 1.0))
		for _ in range(500)
	]

	once = backbeat.assembler.assemble(hits)
	twice = backbeat.assembler.assemble(once)

	assert twice == once
	assert len({backbeat.assembler.dedup_key(hit) for hit in once}) == len(once)
