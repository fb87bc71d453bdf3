"""Application services (use cases) orchestrating repositories via units of work."""
