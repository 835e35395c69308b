"""Transport collaborators."""
