"""HTTP API for the build calculator."""
