import pytest

import backbeat.constants.gm_drums as gm_drums
import backbeat.display
import backbeat.pattern


def _pattern (hits, length_in_beats: float = 4.0, time_signature: str = "4/4", bpm: int = 120) -> backbeat.pattern.Pattern:

	return backbeat.pattern.Pattern(hits=tuple(hits), length_in_beats=length_in_beats, time_signature=time_signature, bpm=bpm)


@pytest.mark.parametrize("velocity, char", [
	(0, "."),
	(40, "."),
	(41, "o"),
	(80, "o"),
	(81, "O"),
	(110, "O"),
	(111, "X"),
	(127, "X"),
])
def test_velocity_char (velocity: int, char: str) -> None:

	assert backbeat.display.velocity_char(velocity) == char


def test_grid_keeps_loudest_hit_per_step () -> None:

	"""Two hits that round to the same step show the louder one."""

	hits = [
		backbeat.pattern.DrumHit(gm_drums.SNARE, 1.0, 0.3, 0.1),
		backbeat.pattern.DrumHit(gm_drums.SNARE, 1.02, 0.9, 0.1),
	]

	grid = backbeat.display.build_velocity_grid(_pattern(hits))

	assert len(grid[gm_drums.SNARE]) == 16
	assert grid[gm_drums.SNARE][4] == 114


def test_grid_wraps_hits_at_pattern_end () -> None:

	"""A crash on the next downbeat wraps round to the first step."""

	grid = backbeat.display.build_velocity_grid(_pattern([backbeat.pattern.DrumHit(gm_drums.CRASH, 4.0, 1.0, 0.5)]))

	assert grid[gm_drums.CRASH][0] == 127


def test_render_grid () -> None:

	"""Header plus one row per voice present, in kit order."""

	hits = [
		backbeat.pattern.DrumHit(gm_drums.HIHAT_CLOSED, 0.0, 0.5, 0.1),
		backbeat.pattern.DrumHit(gm_drums.KICK, 0.0, 1.0, 0.25),
		backbeat.pattern.DrumHit(gm_drums.SNARE, 1.0, 0.7, 0.25),
	]

	lines = backbeat.display.render_grid(_pattern(hits), title="rock")

	assert lines[0] == "rock  4/4  120 BPM  1 bar"
	assert lines[1] == "  Kick            |X . . . . . . . . . . . . . . .|"
	assert lines[2] == "  Snare           |. . . . O . . . . . . . . . . .|"
	assert lines[3].startswith("  Hi-Hat (Closed) |o")
	assert len(lines) == 4


def test_render_grid_plural_bars_without_title () -> None:

	lines = backbeat.display.render_grid(_pattern([], length_in_beats=6.0, time_signature="3/4", bpm=100))

	assert lines == ["3/4  100 BPM  2 bars"]
