"""Beat-based duration constants for hit positions and note lengths.

All values are in **beats**, where 1.0 = one quarter note. Templates use these
for subdivisions and the swing processor uses the triplet positions::

    import backbeat.constants.durations as dur

    # Sixteenth-note hi-hat grid
    steps = int(beats_per_bar / dur.SIXTEENTH)

The swung upbeat is written as ``SWUNG_UPBEAT`` (0.67) rather than an exact
``2 / 3`` so that positions compare equal across templates.
"""

THIRTYSECOND = 0.125
SIXTEENTH = 0.25
EIGHTH = 0.5
QUARTER = 1.0

# Triplet positions within a beat, rounded to two places.
SWUNG_DOWNBEAT = 0.33
SWUNG_UPBEAT = 0.67
