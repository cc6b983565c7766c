"""Home control core: device registry, usage log and command dispatch."""

__version__ = "1.0.0"
