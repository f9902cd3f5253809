"""Convert CLDR emoji annotations into per-locale Fluent resources."""
