"""Factory: centralise object creation behind a type key."""
