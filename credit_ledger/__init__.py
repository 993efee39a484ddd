"""Credit ledger service: priced operations billed against a user balance."""

__version__ = "0.1.0"
