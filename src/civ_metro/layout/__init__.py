"""Layout engine: time scale, corridors, station placement, paths, labels."""
