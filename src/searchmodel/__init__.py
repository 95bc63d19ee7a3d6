"""searchmodel — Search integration for model classes.

Quick start::

    from searchmodel import Searchable

    class Article(Base, Searchable):
        __tablename__ = "articles"

    response = Article.search("foo", default_operator="AND")  # nothing sent yet
    response.ids                                              # executes the search

    Article.scan_all_ids({"query": {"match_all": {}}}, scroll="1m")
"""

from searchmodel.core.request import RequestDefinition, SearchRequest
from searchmodel.core.response import SearchResponse
from searchmodel.core.searching import Searchable

__version__ = "0.1.0"

__all__ = ["RequestDefinition", "SearchRequest", "SearchResponse", "Searchable", "__version__"]
