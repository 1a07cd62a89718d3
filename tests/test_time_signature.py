import logging

import pytest

import backbeat.time_signature


@pytest.mark.parametrize("tag, beats", [
	("3/4", 3),
	("4/4", 4),
	("5/4", 5),
	("6/8", 6),
	("7/8", 3.5),
])
def test_beats_per_bar (tag: str, beats: float) -> None:

	"""Each supported meter maps to its fixed beats-per-bar constant."""

	assert backbeat.time_signature.beats_per_bar(tag) == beats


def test_unknown_time_signature_defaults_to_four_four (caplog: pytest.LogCaptureFixture) -> None:

	"""An unrecognised tag is treated as 4/4 and a warning is logged."""

	with caplog.at_level(logging.WARNING, logger="backbeat.time_signature"):
		assert backbeat.time_signature.beats_per_bar("9/8") == 4

	assert "9/8" in caplog.text


def test_resolve_known_tag_is_unchanged () -> None:

	"""Known tags resolve to themselves."""

	assert backbeat.time_signature.resolve("7/8") == "7/8"


def test_parse_splits_numerator_and_denominator () -> None:

	"""Tags split into integer numerator and denominator."""

	assert backbeat.time_signature.parse("6/8") == (6, 8)
	assert backbeat.time_signature.parse("7/8") == (7, 8)
	assert backbeat.time_signature.parse("bogus") == (4, 4)
