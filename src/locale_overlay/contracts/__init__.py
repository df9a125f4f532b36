"""Schema contracts for locale records and run summaries."""
