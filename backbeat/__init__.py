"""
backbeat - algorithmic drum pattern generation for Python.

Give it a kit style, a time signature, a tempo, a length, and two musical
dials - complexity and dynamics - and it plays the drummer: a rule-based
template lays down the groove for the style, swing and humanization loosen
it up, and the result comes back as an immutable, time-ordered ``Pattern``
ready for playback, MIDI export, or display.

Styles:

- **rock** - hi-hat time, kick/snare backbeat, tom fills every fourth bar.
- **jazz** - swung ride, feathered kick, conversational snare comping.
- **electronic** - four-on-the-floor, sixteenth hats, snare-roll breakdowns.
- **latin** - clave-aware kick and snare, cascara toms, bell accents.
- **lofi** - soft swung ride, sparse kick, ghost-note snare.

Every random decision draws from one ``random.Random`` passed down the
pipeline, so a seed reproduces a pattern exactly.

Minimal example:

    ```python
    import backbeat

    settings = backbeat.GeneratorSettings(kit_style="jazz", bars=4, complexity=0.7)
    pattern = backbeat.generate(settings, seed=42)

    for hit in pattern.hits:
        print(hit.drum, round(hit.time, 3), round(hit.velocity, 2))

    backbeat.save_midi(pattern, "jazz.mid")
    ```

Package-level exports: ``generate``, ``GeneratorSettings``, ``Pattern``,
``DrumHit``, ``save_midi``.
"""

import backbeat.generator
import backbeat.midi_export
import backbeat.pattern
import backbeat.settings


generate = backbeat.generator.generate
GeneratorSettings = backbeat.settings.GeneratorSettings
Pattern = backbeat.pattern.Pattern
DrumHit = backbeat.pattern.DrumHit
save_midi = backbeat.midi_export.save_midi
