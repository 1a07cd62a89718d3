"""ASCII grid rendering of a generated pattern.

Shows one row per drum voice present in the pattern and one column per grid
step, with a character for the loudest hit in each step::

	rock  4/4  120 BPM  1 bar
	  Kick            |X . . . . . . . X . . . . . . .|
	  Snare           |. . . . X . . . . . . . X . . .|
	  Hi-Hat (Closed) |X . O . X . O . X . O . X . O .|

Hits are placed in the step nearest their (humanized or swung) time, so the
grid reads as the intended rhythm rather than the micro-timing.
"""

import math
import typing

import backbeat.constants.gm_drums
import backbeat.midi_export
import backbeat.pattern


_LABEL_WIDTH = 16
_EMPTY = 0


def velocity_char (velocity: int) -> str:

	"""Map a MIDI velocity (0-127) to a single ASCII character.

	Returns:
		``"."`` for no hit / ghost (0-40), ``"o"`` for soft (41-80),
		``"O"`` for medium (81-110), ``"X"`` for loud (111-127).
	"""

	if velocity <= 40:
		return "."
	if velocity <= 80:
		return "o"
	if velocity <= 110:
		return "O"
	return "X"


def build_velocity_grid (pattern: backbeat.pattern.Pattern, steps_per_beat: int = 4) -> typing.Dict[str, typing.List[int]]:

	"""Scan hits and build ``{drum: [midi_velocity_per_step]}`` keeping the loudest per step."""

	if steps_per_beat <= 0:
		raise ValueError("Steps per beat must be positive")

	total_steps = math.ceil(pattern.length_in_beats * steps_per_beat)
	grid: typing.Dict[str, typing.List[int]] = {}

	if total_steps <= 0:
		return grid

	for hit in pattern.hits:

		# Hits rounded past the end (e.g. a crash into the next loop) wrap to step 0
		step = int(round(hit.time * steps_per_beat)) % total_steps

		row = grid.setdefault(hit.drum, [_EMPTY] * total_steps)
		row[step] = max(row[step], backbeat.midi_export.midi_velocity(hit.velocity))

	return grid


def render_grid (pattern: backbeat.pattern.Pattern, title: typing.Optional[str] = None, steps_per_beat: int = 4) -> typing.List[str]:

	"""
	Render the pattern as a list of text lines.

	Parameters:
		pattern: The pattern to draw.
		title: Optional prefix for the header line (e.g. the kit style).
		steps_per_beat: Grid resolution; 4 shows sixteenth notes.
	"""

	bars = pattern.bars
	header = f"{pattern.time_signature}  {pattern.bpm} BPM  {bars} bar{'s' if bars != 1 else ''}"

	if title:
		header = f"{title}  {header}"

	lines = [header]
	grid = build_velocity_grid(pattern, steps_per_beat)

	# Rows follow the kit order (kick first, cymbals last)
	for drum in backbeat.constants.gm_drums.DRUM_VOICES:

		if drum not in grid:
			continue

		label_text = backbeat.constants.gm_drums.DRUM_LABELS.get(drum, drum)
		label = f"  {label_text[:_LABEL_WIDTH].ljust(_LABEL_WIDTH)}"
		cells = " ".join(velocity_char(v) for v in grid[drum])
		lines.append(f"{label}|{cells}|")

	return lines
