"""Infrastructure adapters: database access and outbound HTTP clients."""
