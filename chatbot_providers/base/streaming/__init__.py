"""Streaming primitives for the provider layer."""

from .single_chunk import SingleChunkStream, accumulate_chunks

__all__ = ["SingleChunkStream", "accumulate_chunks"]
