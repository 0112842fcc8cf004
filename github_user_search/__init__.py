"""Debounced GitHub user search with paginated results and infinite scroll."""
