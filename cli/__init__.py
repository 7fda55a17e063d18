"""mediamod command line interface."""
