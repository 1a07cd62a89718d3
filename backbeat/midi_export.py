"""Standard MIDI file export.

Writes a ``Pattern`` as a single-track type 1 MIDI file on the General MIDI
percussion channel. Each drum voice maps to its GM note through
``backbeat.constants.gm_drums.GM_DRUM_MAP`` and each normalised velocity is
scaled to 1-127. Beat positions become ticks at 480 per quarter note.

Example:
	```python
	pattern = backbeat.generator.generate(settings, seed=1)
	filename = backbeat.midi_export.generate_filename(pattern, settings.kit_style) + ".mid"
	backbeat.midi_export.save_midi(pattern, filename)
	```
"""

import io
import logging
import os
import typing

import mido

import backbeat.constants
import backbeat.constants.gm_drums
import backbeat.constants.velocity
import backbeat.pattern
import backbeat.time_signature


logger = logging.getLogger(__name__)


TRACK_NAME = "Virtual Drummer"


def midi_velocity (velocity: float) -> int:

	"""Scale a normalised velocity to a MIDI note_on velocity (1-127)."""

	scaled = int(round(velocity * backbeat.constants.velocity.MAX_VELOCITY))
	return max(backbeat.constants.velocity.MIN_VELOCITY, min(backbeat.constants.velocity.MAX_VELOCITY, scaled))


def _note_events (pattern: backbeat.pattern.Pattern, ticks_per_beat: int) -> typing.List[typing.Tuple[int, mido.Message]]:

	"""Build absolute-tick note_on/note_off pairs for every hit."""

	events: typing.List[typing.Tuple[int, mido.Message]] = []

	for hit in pattern.hits:

		if hit.drum not in backbeat.constants.gm_drums.GM_DRUM_MAP:
			raise ValueError(f"Unknown drum voice '{hit.drum}' - no General MIDI note mapping")

		note = backbeat.constants.gm_drums.GM_DRUM_MAP[hit.drum]
		start = int(round(hit.time * ticks_per_beat))
		length = max(1, int(round(hit.duration * ticks_per_beat)))

		events.append((start, mido.Message('note_on', channel=backbeat.constants.MIDI_DRUM_CHANNEL, note=note, velocity=midi_velocity(hit.velocity))))
		events.append((start + length, mido.Message('note_off', channel=backbeat.constants.MIDI_DRUM_CHANNEL, note=note, velocity=0)))

	# Note-offs sort ahead of note-ons at the same tick so a retrigger is not cut short
	events.sort(key=lambda event: (event[0], 0 if event[1].type == 'note_off' else 1))

	return events


def pattern_to_midi (pattern: backbeat.pattern.Pattern, ticks_per_beat: int = backbeat.constants.MIDI_TICKS_PER_BEAT) -> mido.MidiFile:

	"""
	Convert a pattern to an in-memory ``mido.MidiFile``.

	The track starts with name, tempo and time-signature meta messages,
	followed by the notes, and ends at the pattern's length (or the last
	note-off, whichever is later).
	"""

	if ticks_per_beat <= 0:
		raise ValueError("Ticks per beat must be positive")

	numerator, denominator = backbeat.time_signature.parse(pattern.time_signature)

	mid = mido.MidiFile(type=1)
	mid.ticks_per_beat = ticks_per_beat

	track = mido.MidiTrack()
	mid.tracks.append(track)

	track.append(mido.MetaMessage('track_name', name=TRACK_NAME, time=0))
	track.append(mido.MetaMessage('set_tempo', tempo=mido.bpm2tempo(pattern.bpm), time=0))
	track.append(mido.MetaMessage('time_signature', numerator=numerator, denominator=denominator, time=0))

	last_tick = 0

	for tick, message in _note_events(pattern, ticks_per_beat):
		message.time = tick - last_tick
		track.append(message)
		last_tick = tick

	end_tick = max(last_tick, int(round(pattern.length_in_beats * ticks_per_beat)))
	track.append(mido.MetaMessage('end_of_track', time=end_tick - last_tick))

	return mid


def midi_bytes (pattern: backbeat.pattern.Pattern) -> bytes:

	"""Serialise a pattern to Standard MIDI File bytes."""

	buffer = io.BytesIO()
	pattern_to_midi(pattern).save(file=buffer)
	return buffer.getvalue()


def save_midi (pattern: backbeat.pattern.Pattern, path: typing.Union[str, os.PathLike]) -> str:

	"""
	Write a pattern to a ``.mid`` file and return the path written.

	Errors from the filesystem are logged and re-raised.
	"""

	filename = os.fspath(path)
	mid = pattern_to_midi(pattern)

	logger.info(f"Saving MIDI pattern ({len(pattern.hits)} hits, {pattern.bpm} BPM) to {filename}...")

	try:
		mid.save(filename)
	except OSError as e:
		logger.error(f"Failed to save MIDI pattern: {e}")
		raise

	logger.info(f"Saved {filename}")
	return filename


def generate_filename (pattern: backbeat.pattern.Pattern, kit_style: str) -> str:

	"""
	Build a descriptive base filename (no extension) for a pattern.

	Example: ``"jazz-120bpm-4-4-4bars"``.
	"""

	meter = pattern.time_signature.replace("/", "-")
	return f"{kit_style}-{pattern.bpm}bpm-{meter}-{pattern.bars}bars"
