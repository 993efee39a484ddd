"""Domain modules: users, operations, records and the ledger workflow."""
