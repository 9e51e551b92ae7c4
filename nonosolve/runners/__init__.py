"""Diagnostics and command-line runners."""
