"""Core composition primitives: merging, manifests, config and logging."""
