import dataclasses

import pytest

import backbeat.constants.gm_drums as gm_drums
import backbeat.pattern


def _pattern (hits, length_in_beats: float = 4.0, time_signature: str = "4/4", bpm: int = 120) -> backbeat.pattern.Pattern:

	return backbeat.pattern.Pattern(hits=tuple(hits), length_in_beats=length_in_beats, time_signature=time_signature, bpm=bpm)


def test_timing_properties () -> None:

	"""Seconds per beat and total duration follow from the tempo."""

	pattern = _pattern([], length_in_beats=8.0, bpm=120)

	assert pattern.seconds_per_beat == pytest.approx(0.5)
	assert pattern.duration_seconds == pytest.approx(4.0)
	assert pattern.bars == 2


def test_bars_in_seven_eight () -> None:

	"""Bar count divides by the meter's beats per bar, including the half-beat 7/8."""

	assert _pattern([], length_in_beats=14.0, time_signature="7/8").bars == 4


def test_hits_for_filters_one_voice () -> None:

	hits = [
		backbeat.pattern.DrumHit(gm_drums.KICK, 0.0, 0.9, 0.25),
		backbeat.pattern.DrumHit(gm_drums.SNARE, 1.0, 0.8, 0.25),
		backbeat.pattern.DrumHit(gm_drums.KICK, 2.0, 0.85, 0.25),
	]

	kicks = _pattern(hits).hits_for(gm_drums.KICK)

	assert [hit.time for hit in kicks] == [0.0, 2.0]
	assert _pattern(hits).hits_for(gm_drums.RIDE) == []


def test_pattern_info () -> None:

	"""Info counts hits per voice and reports the length in seconds and bars."""

	hits = [
		backbeat.pattern.DrumHit(gm_drums.KICK, 0.0, 0.9, 0.25),
		backbeat.pattern.DrumHit(gm_drums.HIHAT_CLOSED, 0.0, 0.7, 0.1),
		backbeat.pattern.DrumHit(gm_drums.HIHAT_CLOSED, 0.5, 0.5, 0.1),
		backbeat.pattern.DrumHit(gm_drums.SNARE, 1.0, 0.8, 0.25),
	]

	info = backbeat.pattern.pattern_info(_pattern(hits, length_in_beats=12.0, time_signature="3/4", bpm=90))

	assert info.total_hits == 4
	assert info.hit_counts == {gm_drums.KICK: 1, gm_drums.HIHAT_CLOSED: 2, gm_drums.SNARE: 1}
	assert info.bars == 4
	assert info.duration_seconds == pytest.approx(8.0)


def test_pattern_info_empty () -> None:

	info = backbeat.pattern.pattern_info(_pattern([]))

	assert info.total_hits == 0
	assert info.hit_counts == {}


def test_values_are_frozen () -> None:

	hit = backbeat.pattern.DrumHit(gm_drums.KICK, 0.0, 0.9, 0.25)

	with pytest.raises(dataclasses.FrozenInstanceError):
		hit.velocity = 0.1

	moved = dataclasses.replace(hit, time=1.0)

	assert moved.time == 1.0
	assert hit.time == 0.0
