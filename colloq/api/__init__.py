"""HTTP API for Colloq."""
