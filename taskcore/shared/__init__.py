"""Cross-cutting concerns: configuration, errors, logging and events."""
