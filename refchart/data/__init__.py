"""
Data ingestion and normalization module.

Handles parsing of raw price records into validated, ordered samples and
defines the value objects shared by the series algorithms.
"""
