"""Utils — apoio compartilhado (exceções) sem dependência de app/api."""
