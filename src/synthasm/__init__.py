"""synthasm - synthetic C# assembly fixtures for analysis benchmarks."""

__version__ = "0.1.0"
