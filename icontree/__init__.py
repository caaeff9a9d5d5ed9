"""icontree — SVG icon sources to validated abstract trees and theme names."""

__version__ = "0.1.0"
