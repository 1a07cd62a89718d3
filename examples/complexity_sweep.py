import logging

import backbeat
import backbeat.pattern

logging.basicConfig(level=logging.INFO)

# Watch a style fill up as complexity rises: same seed, same dynamics.
STYLE = "rock"

for step in range(0, 11, 2):

	complexity = step / 10
	settings = backbeat.GeneratorSettings(kit_style=STYLE, bars=4, complexity=complexity, dynamics=0.6)
	pattern = backbeat.generate(settings, seed=7)
	info = backbeat.pattern.pattern_info(pattern)

	counts = ", ".join(f"{drum}={count}" for drum, count in sorted(info.hit_counts.items()))
	logging.info(f"complexity {complexity:.1f}: {info.total_hits} hits ({counts})")
