from .publisher import GitPublisher, PublishError

__all__ = ["GitPublisher", "PublishError"]
