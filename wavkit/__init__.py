"""Read WAV audio files in PCM, IEEE float, A-law and mu-law, and write PCM ones."""

__version__ = "0.1.0"