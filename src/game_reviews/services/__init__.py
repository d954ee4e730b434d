from . import catalog_service, comment_service, review_service

__all__ = ["catalog_service", "comment_service", "review_service"]
