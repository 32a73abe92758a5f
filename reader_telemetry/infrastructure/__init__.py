"""Infrastructure layer: transport adapters, stubs and observability."""
