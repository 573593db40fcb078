"""Browser-driven web search: listing scrape, page extraction, artifact and report."""
