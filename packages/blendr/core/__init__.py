"""Core engine: blending, sequencing, playback, configuration."""
