"""Hubtrack backend: HTTP API and command line tools."""
