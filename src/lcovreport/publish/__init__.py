"""Report delivery."""

from lcovreport.publish.github import GitHubCommentPublisher, PublishResult

__all__ = ["GitHubCommentPublisher", "PublishResult"]
