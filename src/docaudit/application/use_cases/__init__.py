"""Use cases orchestrating the validator and the link checker."""
