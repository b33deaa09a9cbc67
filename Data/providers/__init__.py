"""HTTP providers for upstream user data."""
