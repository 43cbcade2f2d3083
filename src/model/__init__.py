"""Person records, find predicates and the in-memory address book."""
