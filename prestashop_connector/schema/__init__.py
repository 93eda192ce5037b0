"""Resource attribute definitions."""
