"""Configuration package: settings, tier table and business constants."""
