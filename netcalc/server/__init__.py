"""Server bootstrap package."""
