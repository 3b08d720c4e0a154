"""Static site content and bundled reference data."""
