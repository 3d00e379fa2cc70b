"""Host adapters for the navigation session."""
