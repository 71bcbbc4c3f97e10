"""Builder: assemble a complex object step by step."""
