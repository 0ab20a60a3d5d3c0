"""MadaFacture - invoicing, point of sale and daily closing for small shops."""

__version__ = "1.0.0"
