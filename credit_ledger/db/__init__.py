"""ORM models for users, the operation catalog and audit records."""
