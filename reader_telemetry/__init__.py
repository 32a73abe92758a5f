"""
Reader Telemetry - interaction analytics for document readers

Captures what a reader does with an open publication (opening it,
scrubbing the position slider, moving through the text) and forwards
each interaction as an xAPI-style statement to an ingestion endpoint.

Guiding rules:
- Telemetry never interrupts reading
- Delivery is best-effort; a lost statement is an accepted outcome
- Secrets are injected at startup, never compiled into source
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
