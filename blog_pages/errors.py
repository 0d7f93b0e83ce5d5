"""Exception types raised while planning pages."""

from __future__ import annotations


class BlogPagesError(Exception):
    """Base class for all page-planning errors."""


class ConfigError(BlogPagesError, ValueError):
    """Raised when theme options or the config file are invalid."""


class SourceQueryError(BlogPagesError):
    """Raised when a content source returns an unusable response.

    During a build pass it is caught per source: the source contributes
    nothing and the build continues. A snapshot file that cannot be read
    raises it before the pass starts.
    """


class MissingContentError(BlogPagesError):
    """Raised when no articles or no authors survive aggregation."""

    def __init__(self, articles: int, authors: int):
        self.articles = articles
        self.authors = authors
        super().__init__(
            "You must have at least one Author and Post. "
            f"Found {articles} article(s) and {authors} author(s). "
            "Check that your content sources are enabled and that the content "
            "folder contains both authors and posts."
        )


class AuthorNotFoundError(BlogPagesError):
    """Raised when an article's author field matches no known author."""

    def __init__(self, title: str, author: str | None):
        self.title = title
        self.author = author
        super().__init__(
            f'We could not find the Author for: "{title}". '
            "Double check the author field is specified in your post and the "
            "name matches a specified author. "
            f"Provided author: {author}"
        )
