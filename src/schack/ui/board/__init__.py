"""Board rendering widgets."""
