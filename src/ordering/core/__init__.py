"""Core primitives shared by every layer: config, errors, ids, interfaces."""
