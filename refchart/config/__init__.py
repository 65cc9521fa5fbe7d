"""
Configuration module.

Frozen defaults, YAML profile loading and parameter validation for charts.
"""
