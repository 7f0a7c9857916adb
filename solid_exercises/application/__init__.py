"""Application layer - services and coordinators."""
