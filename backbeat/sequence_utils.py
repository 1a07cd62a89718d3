"""Probability gates and per-position ornament tables.

Every optional ornament a template can add (ghost note, comping hit, accent,
texture) is declared as an ``Ornament`` row: a beat position within the bar,
a probability expressed as a function of complexity, and a velocity scale.
``place_ornaments()`` walks a table and makes one independent draw per row, so
each position behaves as its own Bernoulli trial.

Example:
	```python
	GHOSTS = (
		Ornament(gm_drums.SNARE, 0.67, probability=lambda c: 0.4 * c, velocity=0.25, duration=0.08),
		Ornament(gm_drums.SNARE, 1.67, probability=lambda c: 0.5 * c, velocity=(0.2, 0.3), duration=0.08),
	)

	hits.extend(place_ornaments(GHOSTS, bar_offset, beats_per_bar, complexity, base_velocity, rng))
	```
"""

import dataclasses
import random
import typing

import backbeat.pattern


def gate (rng: random.Random, probability: float) -> bool:

	"""Return True with the given probability (one draw from ``rng``)."""

	return rng.random() < probability


def always (complexity: float) -> float:

	"""Probability expression for rows that always play."""

	return 1.0


def chance (value: float) -> typing.Callable[[float], float]:

	"""Build a probability expression that ignores complexity."""

	def probability (complexity: float) -> float:
		return value

	return probability


def scaled (base: float, floor: float = 0.0, slope: float = 1.0) -> typing.Callable[[float], float]:

	"""Build a probability expression ``base * (floor + slope * complexity)``.

	With the defaults this is ``base * complexity``.
	"""

	def probability (complexity: float) -> float:
		return base * (floor + slope * complexity)

	return probability


def rising (floor: float, slope: float) -> typing.Callable[[float], float]:

	"""Build a probability expression ``floor + slope * complexity``."""

	def probability (complexity: float) -> float:
		return floor + slope * complexity

	return probability


@dataclasses.dataclass(frozen=True)
class Ornament:

	"""
	One gated candidate position in a per-style ornament table.

	Attributes:
		drum: Voice to strike.
		position: Beat offset from the start of the bar.
		probability: Maps complexity (0-1) to the chance this position plays.
		velocity: Scale applied to the style's base velocity, or a
			``(low, high)`` range drawn uniformly per hit.
		duration: Hit length in beats.
	"""

	drum: str
	position: float
	probability: typing.Callable[[float], float] = always
	velocity: typing.Union[float, typing.Tuple[float, float]] = 1.0
	duration: float = 0.1


def place_ornaments (
	ornaments: typing.Iterable[Ornament],
	bar_offset: float,
	beats_per_bar: float,
	complexity: float,
	base_velocity: float,
	rng: random.Random,
) -> typing.List[backbeat.pattern.DrumHit]:

	"""
	Draw each ornament independently and return the hits that pass.

	Positions at or beyond the end of the bar are skipped without a draw, so
	tables written for 4/4 reduce cleanly in shorter meters.

	Parameters:
		ornaments: The table to walk.
		bar_offset: Beat position of the bar's downbeat.
		beats_per_bar: Bar length in beats.
		complexity: Current complexity, passed to each probability expression.
		base_velocity: Style base velocity the row's scale multiplies.
		rng: Random source for both the gate and any velocity range.
	"""

	hits: typing.List[backbeat.pattern.DrumHit] = []

	for ornament in ornaments:

		if ornament.position >= beats_per_bar:
			continue

		if not gate(rng, ornament.probability(complexity)):
			continue

		if isinstance(ornament.velocity, tuple):
			scale = rng.uniform(ornament.velocity[0], ornament.velocity[1])
		else:
			scale = ornament.velocity

		hits.append(backbeat.pattern.DrumHit(
			drum = ornament.drum,
			time = bar_offset + ornament.position,
			velocity = base_velocity * scale,
			duration = ornament.duration
		))

	return hits
