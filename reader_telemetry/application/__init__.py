"""Application layer: statement building and the analytics module lifecycle."""
