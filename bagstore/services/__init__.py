"""Services Layer — imperative shell around the core: logs, raises, reads settings."""
