"""Application layer – search, pagination, bulk mutation and suggestion use cases."""
