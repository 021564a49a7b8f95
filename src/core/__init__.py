"""Core: configuración, errores, dominio y proyecciones (sin I/O de red)."""
