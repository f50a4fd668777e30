"""Command-line host for running a form as a conversation."""
