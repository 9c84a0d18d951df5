"""Value blending, positional sampling and resampling."""

from blendr.core.blending.mixer import (
    ValueCategory,
    ensure_compatible,
    is_compatible,
    mix,
    register_value_category,
    unregister_value_category,
    value_category,
)
from blendr.core.blending.resampler import mapped_index, resample, resample_sequence
from blendr.core.blending.sampler import sample_at, sample_sequence

__all__ = [
    "ValueCategory",
    "ensure_compatible",
    "is_compatible",
    "mapped_index",
    "mix",
    "register_value_category",
    "resample",
    "resample_sequence",
    "sample_at",
    "sample_sequence",
    "unregister_value_category",
    "value_category",
]
