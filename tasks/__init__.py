"""Task implementations for the tree pretty-printing demo."""
