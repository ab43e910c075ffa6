"""
News qualify - auditable qualification pipeline for scraped news articles.

Records flow through ordered filter stages:
  duplicate → date_range → language → normalize

Every removed record lands in the exclusion ledger with the reason of the
first stage that rejected it.
"""

__version__ = "1.0.0"
