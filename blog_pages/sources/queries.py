"""GraphQL queries issued to the host framework, one pair per content source."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Query:
    """A named GraphQL query.

    Attributes:
        name: "<source>.<kind>", e.g. "local.articles"
        document: The GraphQL query text
        root: Top-level field of the response holding the edges
    """

    name: str
    document: str
    root: str


LOCAL_AUTHORS = Query(
    name="local.authors",
    root="authors",
    document="""
{
  authors: allAuthor {
    edges {
      node {
        authorsPage
        bio
        id
        name
        featured
        social {
          url
        }
        slug
        avatar {
          small: childImageSharp {
            fluid(maxWidth: 50, quality: 100) {
              src
            }
          }
          medium: childImageSharp {
            fluid(maxWidth: 100, quality: 100) {
              src
            }
          }
          large: childImageSharp {
            fluid(maxWidth: 328, quality: 100) {
              src
            }
          }
        }
      }
    }
  }
}
""",
)

LOCAL_ARTICLES = Query(
    name="local.articles",
    root="articles",
    document="""
{
  articles: allArticle(
    sort: { fields: [date, title], order: DESC }
    limit: 1000
  ) {
    edges {
      node {
        id
        slug
        secret
        title
        author
        date(formatString: "MMMM Do, YYYY")
        dateForSEO: date
        timeToRead
        excerpt
        canonical_url
        subscription
        body
        hero {
          full: childImageSharp {
            fluid(maxWidth: 944, quality: 100) {
              src
            }
          }
        }
      }
    }
  }
}
""",
)

CONTENTFUL_AUTHORS = Query(
    name="contentful.authors",
    root="authors",
    document="""
{
  authors: allContentfulAuthor {
    edges {
      node {
        avatar {
          small: fluid(maxWidth: 50, quality: 100) {
            src
          }
          medium: fluid(maxWidth: 100, quality: 100) {
            src
          }
          large: fluid(maxWidth: 328, quality: 100) {
            src
          }
        }
        bio
        fields {
          authorsPage
          slug
        }
        slug
        name
        featured
        social {
          url
        }
      }
    }
  }
}
""",
)

CONTENTFUL_ARTICLES = Query(
    name="contentful.articles",
    root="articles",
    document="""
{
  articles: allContentfulArticle(
    sort: { fields: [date, title], order: DESC }
    limit: 1000
  ) {
    edges {
      node {
        id
        body {
          childMdx {
            body
            timeToRead
          }
        }
        excerpt
        title
        slug
        secret
        date(formatString: "MMMM Do, YYYY")
        dateForSEO: date
        hero {
          full: fluid(maxWidth: 944, quality: 100) {
            src
          }
        }
        author {
          name
        }
      }
    }
  }
}
""",
)

QUERIES: dict[str, dict[str, Query]] = {
    "local": {"authors": LOCAL_AUTHORS, "articles": LOCAL_ARTICLES},
    "contentful": {"authors": CONTENTFUL_AUTHORS, "articles": CONTENTFUL_ARTICLES},
}
