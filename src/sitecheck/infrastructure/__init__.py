"""Infrastructure layer: HTML parsing, browser engine, profiles, logging."""
