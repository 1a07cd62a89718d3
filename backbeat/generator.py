"""Pattern generation pipeline.

``generate()`` turns a ``GeneratorSettings`` into a finished ``Pattern``::

	settings -> style template -> swing (jazz, lofi) -> humanize -> assemble -> Pattern

Every stage is a pure function of its input hits and the random source. The
random source is a ``random.Random`` passed down to every stage, so a seeded
generator reproduces a pattern exactly::

	pattern = backbeat.generator.generate(GeneratorSettings(kit_style="latin"), seed=7)
"""

import logging
import random
import typing

import backbeat.assembler
import backbeat.humanize
import backbeat.pattern
import backbeat.settings
import backbeat.swing
import backbeat.templates
import backbeat.templates.electronic
import backbeat.templates.jazz
import backbeat.templates.latin
import backbeat.templates.lofi
import backbeat.templates.rock
import backbeat.time_signature


logger = logging.getLogger(__name__)


TEMPLATES: typing.Dict[str, backbeat.templates.TemplateFunction] = {
	backbeat.settings.ROCK: backbeat.templates.rock.generate,
	backbeat.settings.JAZZ: backbeat.templates.jazz.generate,
	backbeat.settings.ELECTRONIC: backbeat.templates.electronic.generate,
	backbeat.settings.LATIN: backbeat.templates.latin.generate,
	backbeat.settings.LOFI: backbeat.templates.lofi.generate,
}

# Swing amount per style; styles not listed play straight.
SWING_AMOUNTS: typing.Dict[str, float] = {
	backbeat.settings.JAZZ: 0.6,
	backbeat.settings.LOFI: 0.5,
}

HUMANIZE_TIMING = 0.4
HUMANIZE_VELOCITY = 0.3


def generate_base_pattern (kit_style: str, time_signature: str, settings: backbeat.settings.GeneratorSettings, rng: random.Random) -> typing.List[backbeat.pattern.DrumHit]:

	"""
	Run the template for ``kit_style``.

	``kit_style`` and ``time_signature`` must already be resolved (see
	``backbeat.settings.resolve_style`` and ``backbeat.time_signature.resolve``);
	an unknown style raises ``KeyError``.
	"""

	template = TEMPLATES[kit_style]

	return template(settings.bars, time_signature, settings.complexity, settings.dynamics, rng)


def generate (
	settings: backbeat.settings.GeneratorSettings,
	rng: typing.Optional[random.Random] = None,
	seed: typing.Optional[int] = None
) -> backbeat.pattern.Pattern:

	"""
	Generate a new drum pattern.

	Never raises for an unknown style or meter: those fall back to rock and
	4/4. Use ``settings.validate()`` beforehand for strict checking.

	Parameters:
		settings: Musical parameters for this pattern.
		rng: Random source shared by every stage. Takes precedence over ``seed``.
		seed: Seed for a new ``Random`` when ``rng`` is not given. With neither,
			each call draws from a fresh unseeded generator.

	Returns:
		A new immutable ``Pattern``; earlier patterns are never modified.
	"""

	if rng is None:
		rng = random.Random(seed)

	kit_style = backbeat.settings.resolve_style(settings.kit_style)
	time_signature = backbeat.time_signature.resolve(settings.time_signature)

	beats_per_bar = backbeat.time_signature.beats_per_bar(time_signature)
	length_in_beats = settings.bars * beats_per_bar

	hits = generate_base_pattern(kit_style, time_signature, settings, rng)

	swing_amount = SWING_AMOUNTS.get(kit_style)
	if swing_amount is not None:
		hits = backbeat.swing.apply_swing(hits, swing_amount)

	hits = backbeat.humanize.humanize(
		hits,
		timing_variation = HUMANIZE_TIMING,
		velocity_variation = HUMANIZE_VELOCITY,
		enabled = True,
		rng = rng
	)

	hits = backbeat.assembler.assemble(hits)

	logger.debug("Generated %s pattern: %d bars of %s at %d BPM, %d hits", kit_style, settings.bars, time_signature, settings.bpm, len(hits))

	return backbeat.pattern.Pattern(
		hits = tuple(hits),
		length_in_beats = length_in_beats,
		time_signature = time_signature,
		bpm = settings.bpm
	)
