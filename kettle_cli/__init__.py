"""Command line surface for kettle."""
