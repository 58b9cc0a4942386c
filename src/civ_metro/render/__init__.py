"""SVG rendering of a computed layout."""
