"""Drum voices and their General MIDI note map.

A pattern uses a closed set of nine drum voices. Each voice is a plain string
name; the MIDI exporter looks the name up in ``GM_DRUM_MAP`` to find the
General MIDI Level 1 percussion note for channel 10 (0-indexed channel 9).

Two ways to use this module:

1. **As names** - templates emit hits using the voice constants::

       import backbeat.constants.gm_drums as gm_drums

       hits.append(backbeat.pattern.DrumHit(gm_drums.KICK, time=0.0, velocity=0.8, duration=0.25))

2. **As a note map** - exporters translate a voice to a MIDI note::

       note = backbeat.constants.gm_drums.GM_DRUM_MAP[hit.drum]
"""

import typing


# ─── Voice names ─────────────────────────────────────────────────────

KICK = "kick"
SNARE = "snare"
HIHAT_CLOSED = "hihat_closed"
HIHAT_OPEN = "hihat_open"
TOM_HIGH = "tom_high"
TOM_MID = "tom_mid"
TOM_LOW = "tom_low"
CRASH = "crash"
RIDE = "ride"

DRUM_VOICES: typing.Tuple[str, ...] = (
	KICK,
	SNARE,
	HIHAT_CLOSED,
	HIHAT_OPEN,
	TOM_HIGH,
	TOM_MID,
	TOM_LOW,
	CRASH,
	RIDE,
)


# ─── General MIDI note numbers ───────────────────────────────────────
#
# Subset of the GM Level 1 percussion key map used by the nine voices.

KICK_1 = 36
SNARE_1 = 38
HI_HAT_CLOSED = 42
HI_HAT_OPEN = 46
HIGH_TOM = 50
LOW_MID_TOM = 47
LOW_TOM = 45
CRASH_1 = 49
RIDE_1 = 51


# ─── Voice to note map ───────────────────────────────────────────────

GM_DRUM_MAP: typing.Dict[str, int] = {
	KICK: KICK_1,
	SNARE: SNARE_1,
	HIHAT_CLOSED: HI_HAT_CLOSED,
	HIHAT_OPEN: HI_HAT_OPEN,
	TOM_HIGH: HIGH_TOM,
	TOM_MID: LOW_MID_TOM,
	TOM_LOW: LOW_TOM,
	CRASH: CRASH_1,
	RIDE: RIDE_1,
}


# Human-readable labels for displays and exported track listings.

DRUM_LABELS: typing.Dict[str, str] = {
	KICK: "Kick",
	SNARE: "Snare",
	HIHAT_CLOSED: "Hi-Hat (Closed)",
	HIHAT_OPEN: "Hi-Hat (Open)",
	TOM_HIGH: "High Tom",
	TOM_MID: "Mid Tom",
	TOM_LOW: "Low Tom",
	CRASH: "Crash",
	RIDE: "Ride",
}
