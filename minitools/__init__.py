"""Small command-line tools: text helpers, unit conversion, bit counting, duplicate
lines, URL fetching, tiny HTTP servers and generated graphics."""

__version__ = "0.1.0"