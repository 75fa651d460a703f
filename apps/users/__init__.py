"""Users app: accounts, roles, JWT issuance and the per-request principal."""
