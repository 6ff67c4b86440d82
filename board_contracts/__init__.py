"""Contract tests and typed SDK for the discussion board API."""
