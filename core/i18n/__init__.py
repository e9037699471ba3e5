"""Label translations loaded from TSV files."""
