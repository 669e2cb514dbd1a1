"""Infrastructure layer: request predicates and classifier adapters."""
