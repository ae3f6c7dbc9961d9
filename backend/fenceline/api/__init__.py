"""HTTP API for the fenceline engine."""
