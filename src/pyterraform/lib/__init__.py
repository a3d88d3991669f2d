"""Shared helpers for the pyterraform CLI and library."""
