"""Time-signature arithmetic.

A time signature is one of five string tags. Each maps to a fixed number of
beats per bar, where a beat is a quarter note. Compound and odd meters follow
one convention throughout the package: ``"6/8"`` counts as six beats and
``"7/8"`` as three and a half (seven eighth notes expressed in quarter-note
beats).
"""

import logging
import typing


logger = logging.getLogger(__name__)


DEFAULT_TIME_SIGNATURE = "4/4"

BEATS_PER_BAR: typing.Dict[str, float] = {
	"3/4": 3,
	"4/4": 4,
	"5/4": 5,
	"6/8": 6,
	"7/8": 3.5,
}

TIME_SIGNATURES: typing.Tuple[str, ...] = tuple(BEATS_PER_BAR)


def resolve (time_signature: str) -> str:

	"""Return the tag itself if known, otherwise the 4/4 default.

	Unknown tags are substituted rather than rejected, so generation never
	fails on a bad meter. A warning is logged for the substitution.
	"""

	if time_signature in BEATS_PER_BAR:
		return time_signature

	logger.warning("Unknown time signature %r - using %s", time_signature, DEFAULT_TIME_SIGNATURE)
	return DEFAULT_TIME_SIGNATURE


def beats_per_bar (time_signature: str) -> float:

	"""Number of quarter-note beats in one bar of the given meter."""

	return BEATS_PER_BAR[resolve(time_signature)]


def parse (time_signature: str) -> typing.Tuple[int, int]:

	"""
	Split a tag into ``(numerator, denominator)``, e.g. ``"7/8"`` -> ``(7, 8)``.

	Unknown tags resolve to ``(4, 4)``.
	"""

	numerator, denominator = resolve(time_signature).split("/")
	return int(numerator), int(denominator)
