"""Per-request document pipeline composing storage, extraction and the agent adapters."""

from src.pipeline.service import DocumentPipeline, create_pipeline

__all__ = ["DocumentPipeline", "create_pipeline"]
