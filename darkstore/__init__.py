"""Account lifecycle and notification audience backend for the dark-store platform."""
