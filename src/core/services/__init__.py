"""Servicios del Core: proyecciones de respuestas a informes y tablas."""
