"""Command implementations for the workflows CLI."""
