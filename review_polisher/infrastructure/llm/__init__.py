from .synthesis_service import ReviewSynthesisService, build_messages

__all__ = ["ReviewSynthesisService", "build_messages"]
