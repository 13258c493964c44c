"""HTTP adapter over the roster directories."""
