"""KM271 - a Buderus KM271 parameter codec."""

__version__ = "0.4.1"
VERSION = __version__
