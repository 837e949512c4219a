"""
HTTP API for parsing CLF lines.
"""
