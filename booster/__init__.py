"""A pygame side-scrolling platform game built from update and graphics components."""

__version__ = "0.1.0"