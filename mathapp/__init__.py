"""Console toolbox of small math utilities, area formulas and games of chance."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "games", "geometry", "menu", "numbers"]