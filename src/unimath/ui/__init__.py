"""User interfaces built on top of the unimath core."""
