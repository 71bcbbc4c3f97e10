"""Iterator: traverse a collection without exposing how it is stored."""
