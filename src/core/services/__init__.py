"""Services: the detect -> install -> block -> persist sequence."""
