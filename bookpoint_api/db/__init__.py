"""Database package - engine and redis clients used by health probes."""
