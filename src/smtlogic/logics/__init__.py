"""Bundled SMT-LIB logic definition files (package data)."""
