"""Annotation synthesis for Garry's Mod Lua sources in a language server."""

__version__ = "0.4.0"
