"""
Line-oriented parsing of .sii definition files.

This package turns raw definition text into typed records without building a
full syntax tree of the format.

Modules:
- lines: line splitting with CRLF/LF detection
- fields: marker-based field extractors
- engine: engine record builder
- transmission: transmission record builder
"""
