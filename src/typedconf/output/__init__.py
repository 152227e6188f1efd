"""Output layer: command results and their human/JSON rendering."""
