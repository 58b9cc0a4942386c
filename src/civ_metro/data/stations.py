"""Station records for the built-in map.

Only the fields the layout and renderer read are kept. The first line of
each record is the station's primary line.
"""

from __future__ import annotations

__all__ = ["ERAS", "JOURNEY_STATIONS", "STATIONS", "load_stations"]

from civ_metro.model import Station

# (id, name, year, year_label, lines, significance)
_RECORDS: tuple[tuple[str, str, int, str, tuple[str, ...], str], ...] = (
    ("neolithic", "The Neolithic Junction", -10000, "10,000 BCE", ("tech", "population"), "major"),
    ("pottery", "Pottery & Ceramics", -8000, "8,000 BCE", ("tech",), "minor"),
    ("copper", "Copper Age", -6000, "6,000 BCE", ("tech",), "minor"),
    ("agriculture-spread", "Agricultural Revolution", -5000, "5,000 BCE", ("population", "tech"), "major"),
    ("mesopotamia", "Mesopotamian Cities", -4000, "4,000 BCE", ("empire", "population"), "major"),
    ("uruk", "Uruk Central", -3500, "3,500 BCE", ("tech", "empire", "population"), "hub"),
    ("indus", "Indus Valley", -3300, "3,300 BCE", ("empire", "tech"), "major"),
    ("wheel", "The Wheel", -3200, "3,200 BCE", ("tech",), "major"),
    ("egypt", "Ancient Egypt", -3100, "3,100 BCE", ("empire", "tech"), "major"),
    ("bronze", "Bronze Age", -3000, "3,000 BCE", ("tech", "war"), "major"),
    ("pyramids", "Great Pyramids", -2600, "2,600 BCE", ("empire", "tech"), "major"),
    ("code-hammurabi", "Hammurabi's Code", -1750, "1,750 BCE", ("philosophy", "empire"), "major"),
    ("iron", "Iron Age", -1200, "1,200 BCE", ("tech", "war"), "major"),
    ("olympics", "First Olympics", -776, "776 BCE", ("philosophy", "population"), "minor"),
    ("buddha", "Buddha & Philosophy", -563, "563 BCE", ("philosophy",), "major"),
    ("confucius", "Confucius", -551, "551 BCE", ("philosophy", "empire"), "major"),
    ("persian", "Persian Empire", -550, "550 BCE", ("empire",), "major"),
    ("rome", "Roman Republic", -509, "509 BCE", ("empire", "philosophy"), "major"),
    ("classical", "Classical Era", -500, "500 BCE", ("empire", "philosophy"), "hub"),
    ("alexander", "Alexander the Great", -336, "336 BCE", ("empire", "philosophy"), "major"),
    ("qin", "Qin Dynasty", -221, "221 BCE", ("empire", "tech"), "major"),
    ("jesus", "Jesus & Christianity", 0, "1 CE", ("philosophy",), "major"),
    ("han", "Han Dynasty Peak", 100, "100 CE", ("empire", "tech"), "major"),
    ("pax-romana", "Pax Romana", 117, "117 CE", ("empire", "tech"), "major"),
    ("fall-rome", "Fall of Rome", 476, "476 CE", ("war", "empire"), "major"),
    ("justinian", "Justinian Code", 529, "529 CE", ("philosophy", "empire"), "minor"),
    ("tang", "Tang Dynasty", 618, "618 CE", ("empire", "philosophy"), "major"),
    ("vikings", "Viking Age", 793, "793 CE", ("war", "tech"), "major"),
    ("islamic-golden", "Islamic Golden Age", 800, "800 CE", ("tech", "philosophy"), "major"),
    ("gunpowder", "Gunpowder", 850, "850 CE", ("tech", "war"), "major"),
    ("crusades", "The Crusades", 1095, "1095 CE", ("war", "philosophy", "empire"), "major"),
    ("mongol", "Mongol Empire", 1206, "1206 CE", ("empire", "war"), "major"),
    ("magna-carta", "Magna Carta", 1215, "1215 CE", ("philosophy", "empire"), "major"),
    ("mali-empire", "Mali Empire", 1324, "1324 CE", ("empire", "tech"), "minor"),
    ("black-death", "Black Death", 1347, "1347 CE", ("population", "war"), "crisis"),
    ("renaissance", "Renaissance", 1400, "1400 CE", ("philosophy", "tech"), "major"),
    ("printing", "Printing Press", 1440, "1440 CE", ("tech", "philosophy"), "major"),
    ("gutenberg", "Gutenberg Bible", 1455, "1455 CE", ("tech", "philosophy"), "major"),
    ("columbian", "Columbian Exchange Terminal", 1492, "1492 CE", ("empire", "population", "tech"), "hub"),
    ("reformation", "The Reformation", 1517, "1517 CE", ("philosophy", "war"), "major"),
    ("scientific-rev", "Scientific Revolution", 1543, "1543 CE", ("tech", "philosophy"), "major"),
    ("enlightenment", "Enlightenment", 1687, "1687 CE", ("philosophy", "tech"), "major"),
    ("steam", "Steam Engine", 1712, "1712 CE", ("tech",), "major"),
    ("watt", "Watt's Engine", 1769, "1769 CE", ("tech",), "major"),
    ("french-rev", "French Revolution", 1789, "1789 CE", ("war", "philosophy", "empire"), "major"),
    ("industrial", "Industrial Grand Central", 1800, "1800 CE", ("tech", "population", "philosophy"), "hub"),
    ("railroad", "Railroads", 1825, "1825 CE", ("tech",), "major"),
    ("telegraph", "Telegraph", 1844, "1844 CE", ("tech",), "major"),
    ("communist-manifesto", "Marx & Labor", 1848, "1848 CE", ("philosophy", "empire"), "major"),
    ("darwin", "Origin of Species", 1859, "1859 CE", ("philosophy", "tech"), "major"),
    ("electricity", "The Electric Spark", 1879, "1879 CE", ("tech",), "major"),
    ("germ-theory", "Germ Theory", 1880, "1880 CE", ("tech", "population"), "major"),
    ("flight", "Aviation", 1903, "1903 CE", ("tech",), "major"),
    ("ww1", "World War I", 1914, "1914 CE", ("war", "tech"), "crisis"),
    ("suffrage", "Women's Suffrage", 1920, "1920 CE", ("philosophy", "population"), "major"),
    ("penicillin", "Penicillin", 1928, "1928 CE", ("tech", "population"), "major"),
    ("crisis", "The Crisis Hub", 1914, "1914-1945", ("war", "tech", "empire", "philosophy"), "crisis"),
    ("atomic", "The Atomic Station", 1945, "1945 CE", ("tech", "war"), "crisis"),
    ("transistor", "The Transistor", 1947, "1947 CE", ("tech",), "major"),
    ("dna", "DNA Structure", 1953, "1953 CE", ("tech", "philosophy"), "major"),
    ("space", "Space Age", 1957, "1957 CE", ("tech",), "major"),
    ("moon-landing", "Apollo 11", 1969, "1969 CE", ("tech", "empire", "philosophy"), "major"),
    ("internet", "ARPANET", 1969, "1969 CE", ("tech",), "major"),
    ("pc", "Personal Computer", 1977, "1977 CE", ("tech",), "major"),
    ("berlin-wall-fall", "Fall of the Wall", 1989, "1989 CE", ("empire", "philosophy"), "major"),
    ("web", "The Web", 1991, "1991 CE", ("tech",), "major"),
    ("human-genome", "Human Genome", 2003, "2003 CE", ("tech", "philosophy"), "major"),
    ("smartphone", "Smartphone", 2007, "2007 CE", ("tech", "population"), "major"),
    ("social-media", "Social Network", 2010, "2010 CE", ("tech", "philosophy", "population"), "minor"),
    ("crypto-ai-start", "Decentralization & AI", 2017, "2017 CE", ("tech", "empire"), "minor"),
    ("singularity", "Digital Singularity / AGI", 2025, "2025 CE", ("tech", "population", "philosophy", "empire"), "current"),
)

STATIONS: tuple[Station, ...] = tuple(
    Station(
        id=sid,
        name=name,
        year=year,
        year_label=label,
        lines=lines,
        significance=significance,
    )
    for sid, name, year, label, lines, significance in _RECORDS
)

JOURNEY_STATIONS: tuple[str, ...] = (
    "neolithic",
    "uruk",
    "classical",
    "columbian",
    "industrial",
    "crisis",
    "singularity",
)
"""Guided tour stops, in order."""

ERAS: dict[str, tuple[int, int]] = {
    "ancient": (-10000, -1000),
    "classical": (-1000, 500),
    "medieval": (500, 1500),
    "modern": (1500, 1900),
    "contemporary": (1900, 2025),
}
"""Era quick-filter ranges (inclusive years)."""


def load_stations(
    lines: set[str] | None = None,
    era: tuple[int, int] | None = None,
) -> tuple[Station, ...]:
    """Built-in stations, optionally limited to some lines or a year range."""
    result = STATIONS
    if lines is not None:
        wanted = {line.lower() for line in lines}
        result = tuple(
            s for s in result if any(lid.value in wanted for lid in s.lines)
        )
    if era is not None:
        start, end = era
        result = tuple(s for s in result if start <= s.year <= end)
    return result
