"""Infrastructure layer - concrete providers, factories and wiring."""
