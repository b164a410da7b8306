"""Engine utilities: vectors, matrices, events, connection slots, error reporting, small tools and an .obj reader."""

__version__ = "0.1.0"