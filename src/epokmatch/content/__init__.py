"""Bundled content bank resources."""
