"""
sii-catalog: engine and transmission catalog builder for truck definition files.

Scans an extracted ``def/vehicle/truck`` tree of ``.sii`` definition files,
pulls engine and transmission specifications out of them with line-oriented
parsing, and writes a brand -> model -> component JSON document.

Main features:
- Marker-based field extraction (name, rated power, torque, rpm limit, ratios)
- All-or-nothing model entries grouped by brand
- Compact or pretty JSON output (YAML optional)
- YAML configuration validated against a JSON schema
"""

__version__ = "0.2.0"
