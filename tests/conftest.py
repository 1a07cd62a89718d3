import random

import pytest


class FixedRandom (random.Random):

	"""Random source whose ``random()`` always returns the same value.

	``uniform()`` is built on ``random()``, so a value of 0.0
	passes every probability gate and picks the low end of every range, while
	a value close to 1.0 fails every gate below certainty.
	"""

	def __init__ (self, value: float) -> None:

		"""Store the value returned by every draw."""

		super().__init__(0)
		self.value = value
		self.draws = 0

	def random (self) -> float:

		"""Return the fixed value and count the draw."""

		self.draws += 1
		return self.value


@pytest.fixture
def rng () -> random.Random:

	"""A seeded random source so tests are repeatable."""

	return random.Random(1234)


@pytest.fixture
def always_rng () -> FixedRandom:

	"""A random source that passes every probability gate."""

	return FixedRandom(0.0)


@pytest.fixture
def never_rng () -> FixedRandom:

	"""A random source that fails every probability gate below 1.0."""

	return FixedRandom(0.999999)
