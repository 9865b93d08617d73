"""Style vocabulary, policy resolution, transition tables and the styling engine."""
