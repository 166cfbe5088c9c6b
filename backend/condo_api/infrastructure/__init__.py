"""Infrastructure Layer: cross-cutting concerns (logging) shared by the shell."""
