"""Pattern example tests."""
