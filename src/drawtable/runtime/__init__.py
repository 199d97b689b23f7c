"""Random source and run logging."""
