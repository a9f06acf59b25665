"""
Valet - Software License Catalog

Keep track of purchased software: license keys, registration details,
download links, notes and attachments.
"""

__version__ = "1.0.0"
