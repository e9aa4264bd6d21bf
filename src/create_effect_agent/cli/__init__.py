"""Command-line interface for create-effect-agent."""
