"""Infrastructure adapters: logging and the metadata collaborator."""
