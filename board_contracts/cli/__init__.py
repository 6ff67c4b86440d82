"""boardcheck command line interface."""
