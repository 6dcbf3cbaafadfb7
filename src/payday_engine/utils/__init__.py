"""Date, formatting and holiday helpers."""
