# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Inicializador del paquete principal 'app' del backend UserHub.

Funciones:
- Asegura compatibilidad del event loop de asyncio en Windows
  (asyncpg y SQLAlchemy Async).
- Permite que los módulos internos puedan importarse como 'app.*'
  cuando la carpeta 'backend' se incluye en PYTHONPATH.

Autor: UserHub
Fecha: 2026-09-02
"""
import sys
import asyncio

if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

# Fin del archivo backend/app/__init__.py
