"""Built-in station dataset: 10,000 BCE to 2025 CE."""

from civ_metro.data.stations import ERAS, JOURNEY_STATIONS, STATIONS, load_stations

__all__ = ["ERAS", "JOURNEY_STATIONS", "STATIONS", "load_stations"]
