"""ListOps core: list algorithms, sorting, and configuration."""
