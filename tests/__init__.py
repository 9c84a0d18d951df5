"""Test suite for blendr.

Test Structure:
- unit/: Unit tests for individual components
  - utils/: Logging, math and JSON helpers
  - config/: Config models and loaders
  - blending/: Mixer, sampler and resampler
  - sequencing/: Keyframe models and the sequence state machine
  - playback/: Controller, commands, timing and host
  - rendering/: Status line
  - cli/: Command-line entry point
- conftest.py: Shared fixtures and test configuration
"""
