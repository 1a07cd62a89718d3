"""Velocity constants.

Hits carry a normalised velocity (0.0-1.0). Humanization clamps into
``MIN_HIT_VELOCITY``-``MAX_HIT_VELOCITY``; the MIDI exporter scales to the
0-127 MIDI range.
"""

# Normalised bounds after humanization
MIN_HIT_VELOCITY = 0.1
MAX_HIT_VELOCITY = 1.0

# MIDI standard range (note_on with velocity 0 is a note_off, so exported hits start at 1)
MIN_VELOCITY = 1
MAX_VELOCITY = 127
