"""Modelos y parsers del dominio.

Por qué:
- Aquí viven las estructuras de datos inmutables (Pydantic v2) y los parsers puros.
- El dominio no conoce la CLI ni el transporte concreto.
"""
