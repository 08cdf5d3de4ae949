"""Utility functions."""

from .http import HTTPClient, HTTPResponse

__all__ = ["HTTPClient", "HTTPResponse"]
