"""FAIR metadata records with DataCite export, and Handle System protocol field codecs."""

__version__ = "0.1.0"