"""colocount CLI."""
