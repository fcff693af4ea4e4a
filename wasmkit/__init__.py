"""Resolve and download Substrate WASM runtimes, and format reports about them."""

__version__ = "0.1.0"