# blocksynth

The state model of a modular "blocks" synthesizer, in pure Python with
no dependencies. It keeps track of which modules are in use, where they
sit on the grid, how they are modulated, and how a patch is saved. It
also builds the wave tables that an oscillator would read from.

## What is in it

- `blocksynth.modules` has the concrete modules. Blocks are
  `OscillatorModule`, `FilterModule`, `ReverbModule`, `DelayModule`,
  `DriveModule` and `MixerModule`. Modulators are `LFOModule` and
  `EnvelopeModule`. Each one creates its own parameters.
- `blocksynth.factory` has `create_block(module_type, number)` and
  `create_modulator(module_type, number)`. The type names are `"osc"`,
  `"filter"`, `"reverb"`, `"delay"`, `"drive"` and `"mixer"` for blocks,
  and `"lfo"` and `"adsr"` for modulators. An unknown type raises
  `ValueError`.
- `blocksynth.module` has the base classes `Module` and `Block`, plus
  `ModuleId`, `Category` and the type-name constants.
- `blocksynth.parameters` has `NormalisableRange` and the `FloatParameter`,
  `IntParameter`, `ChoiceParameter` and `BoolParameter` classes. Each of
  these parameters stores its value as a proportion from 0 to 1.
  `ModuleParameter` wraps one of them together with the modulations
  aimed at it.
- `blocksynth.modulation` has `Modulation`, which routes a source module
  to one parameter of a target. It has a magnitude from -1 to 1 and a
  bipolar flag.
- `blocksynth.container.ModuleContainer` and `blocksynth.pool.ModulePool`
  hold the pre-built modules. There are 5 of each type and 40
  modulations. They are lent out and taken back.
- `blocksynth.manager.ModuleManager` places blocks on a grid of 7 rows
  and 5 columns (`blocksynth.index.Index`). It also adds modulators and
  connects them to parameters. It refuses a connection that already
  exists, and it removes routings when their modules are removed.
- `blocksynth.preset_info.PresetInfo` takes a snapshot of a patch.
  `blocksynth.preset_coder` has `encode` and `decode` to turn it into
  JSON and back. `decode` returns `None` when `format_version` is
  missing a number, and raises `ValueError` for a malformed document.
- `blocksynth.preset_manager.PresetManager` keeps presets as
  `<name>.blocks` files in a directory. The default directory is
  `~/Music/blocks/Presets`.
- `blocksynth.wavetable` has `WaveTable` and `Waveform`.
  `blocksynth.wavetable_constants.WaveTableBank` builds band-limited
  sawtooth, square and triangle tables, plus sine and simple square,
  triangle and sawtooth LFO shapes. The module also has `fft` and
  `normalize_waveform`.
- There are also these helpers:
  - `note_helper` for tempo-synced durations and `index_to_hertz`
  - `noise.NoiseGenerator`
  - `unique_random.UniqueRandom`
  - `interpolation.decimal_subscript`
  - `preset_names.generate`
  - `theme.ThemeManager` with three colour themes
  - `note_logger.NoteLogger`, which reports notes that started and ended
  - `user_settings.UserSettings`, a key-value store saved to an XML file

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from blocksynth import preset_coder
from blocksynth.index import Index
from blocksynth.manager import ModuleManager
from blocksynth.preset_info import PresetInfo

manager = ModuleManager()
osc = manager.add_block("osc", Index(0, 0), 1)
lfo = manager.add_modulator("lfo", 1, 0)
manager.add_connection(lfo, osc, 5, 1)   # parameter 5 of an oscillator is gain

info = PresetInfo.create("my preset", manager.blocks, manager.modulators, manager.connections)
text = preset_coder.encode(info)
restored = preset_coder.decode(text)
```

Wave tables:

```python
from blocksynth.wavetable_constants import WaveTableBank, WaveTableType

bank = WaveTableBank()
bank.load(44100)   # pure-Python FFTs; takes a few seconds
saw = bank.get(WaveTableType.BANDLIMITED_SAWTOOTH)
waveform = saw.get_waveform(0.001)
```

## What it does not do

- **No sound.** There is no audio engine, no voices and no DSP
  processors. Nothing here renders or plays audio.
- **No user interface.** Themes are colour data with listeners, and
  nothing draws them.
- **No note tabs.** Column tabs are not modelled. `encode` writes an
  empty `"tabs"` list, and `decode` skips any tab entries it finds.
- **No colour pool.** `ModulePool` can take an object that hands out
  module colours. Without one, a modulator keeps its colour and is only
  given the requested colour id.
- **No stock presets.** Only presets found as files in the presets
  directory are loaded.
- **No command-line program.**