"""Application layer - use-case services built on domain interfaces."""
