"""blendr - keyframe sequencing and interpolation engine."""

__version__ = "0.1.0"
