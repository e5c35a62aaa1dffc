"""State model of a modular block synthesizer: modules, modulations, presets and wave tables."""

__version__ = "0.1.0"