"""Adaptadores de infraestructura (HTTP, serialización).

Por qué un paquete aparte:
- httpx y los detalles del wire format quedan fuera del Core y de la CLI.
"""
