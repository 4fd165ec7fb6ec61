"""Web layer: error handling and views."""
