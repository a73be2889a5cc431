"""Editor hook registration."""
