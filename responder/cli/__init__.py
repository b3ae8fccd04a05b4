"""Command line interface for responder."""
