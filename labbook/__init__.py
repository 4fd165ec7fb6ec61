"""Comments and owner notifications for a laboratory notebook."""
