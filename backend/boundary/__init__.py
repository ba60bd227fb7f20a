"""
Boundary layer for external system integrations.

Handles all interactions with external providers (vector index, embedding
and language model APIs). Provides adapters and clients for them.
"""
