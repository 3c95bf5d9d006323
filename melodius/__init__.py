"""Fast trigonometry, audio level helpers, timing and elementary special functions."""

__version__ = "0.1.0"
__all__ = [
    "accutrig",
    "audio_math",
    "benchmark",
    "elementary",
    "fasttrig",
    "gamma",
    "quadrature",
]