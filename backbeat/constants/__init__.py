"""Constants for backbeat.

This package contains three sets of constants:

- ``backbeat.constants.durations`` - Beat-based durations for subdivisions and fills
- ``backbeat.constants.velocity`` - Normalised and MIDI velocity bounds
- ``backbeat.constants.gm_drums`` - Drum voice names and their General MIDI note numbers

The MIDI file resolution is defined here because both the exporter and the
grid display convert beat positions to ticks.
"""

# Ticks per quarter note for exported MIDI files.

MIDI_TICKS_PER_BEAT = 480

# General MIDI percussion channel (channel 10, 0-indexed).

MIDI_DRUM_CHANNEL = 9
