"""Settings, errors, logging, pagination and the domain models."""
