"""Cross-cutting infrastructure: configuration, logging, auth, retry, HTTP clients."""
