"""One service class per API resource family."""
