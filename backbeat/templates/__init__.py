"""Style templates.

Each module exposes one function with the same signature::

	generate(bars, time_signature, complexity, dynamics, rng) -> List[DrumHit]

A template walks the pattern bar by bar and emits the raw hits for its style.
The output is unsorted and may contain duplicates; ordering and
deduplication happen later in ``backbeat.assembler``.

Available styles: ``rock``, ``jazz``, ``electronic``, ``latin``, ``lofi``.
"""

import random
import typing

import backbeat.pattern


TemplateFunction = typing.Callable[[int, str, float, float, random.Random], typing.List[backbeat.pattern.DrumHit]]
