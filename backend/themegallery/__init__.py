"""Theme gallery backend: theme submission background function and UI components."""
