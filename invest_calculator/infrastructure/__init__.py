"""Infrastructure adapters: settings, logging and wiring."""
