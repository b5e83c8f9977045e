"""Alfred snippet pack builder for the Unicode emoji registry."""
