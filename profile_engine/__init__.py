"""Profile engine: layer aggregation, insight generation and trait refinement."""

__version__ = "0.1.0"
