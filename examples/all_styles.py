import logging
import os

import backbeat
import backbeat.display
import backbeat.midi_export
import backbeat.settings

logging.basicConfig(level=logging.INFO)

OUTPUT_DIR = "patterns"
SEED = 2024

os.makedirs(OUTPUT_DIR, exist_ok=True)

# One four-bar pattern per style at a moderate setting, each printed and saved.
for style in backbeat.settings.KIT_STYLES:

	settings = backbeat.GeneratorSettings(
		kit_style = style,
		bpm = 96 if style == "lofi" else 120,
		bars = 4,
		complexity = 0.65,
		dynamics = 0.5
	)

	pattern = backbeat.generate(settings, seed=SEED)

	print("\n".join(backbeat.display.render_grid(pattern, title=style)))
	print()

	filename = backbeat.midi_export.generate_filename(pattern, style) + ".mid"
	backbeat.save_midi(pattern, os.path.join(OUTPUT_DIR, filename))
