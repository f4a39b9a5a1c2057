"""
Data models for parsed truck definitions.

Modules:
- records: engine/transmission records, model entries, build results and scan reports
"""
