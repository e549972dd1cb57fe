"""Command-line store for a JSON file of user records."""
