"""Domain models, errors and parsers for XYZ structures."""
