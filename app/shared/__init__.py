# app/shared/__init__.py
"""
Piezas compartidas entre módulos: configuración, base de datos,
middlewares, storage y utilidades.
"""
