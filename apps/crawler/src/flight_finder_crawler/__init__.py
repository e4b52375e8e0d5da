"""Flight Finder crawler - upstream providers and transform layer."""
