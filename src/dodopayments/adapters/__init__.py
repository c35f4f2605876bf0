"""I/O adapters: the httpx transport, webhook verification and resource services."""
