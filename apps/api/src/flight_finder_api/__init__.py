"""Flight Finder HTTP API."""
