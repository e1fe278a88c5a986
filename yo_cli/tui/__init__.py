"""Interactive screen routing."""
