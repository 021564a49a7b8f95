"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las formas de las respuestas de la API (Pydantic v2).
- El dominio no conoce HTTP ni la CLI: solo conceptos de VAT.
"""
