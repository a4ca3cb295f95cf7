"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos de la API de lanzamientos (Pydantic v2).
- El dominio no conoce HTTP ni CLI: solo la forma de los datos.
"""
