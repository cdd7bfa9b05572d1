"""Data access: lookups, loaders, exports and ingestion."""
