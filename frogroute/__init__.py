"""Multi-depot vehicle routing: distances, clusters, savings routes, solution decoding and reports."""

__version__ = "0.1.0"
__all__ = ["cluster", "decoding", "distances", "report", "routes", "savings", "vehicle"]