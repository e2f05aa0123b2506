"""Version 1 of the Warranty Checker API."""
