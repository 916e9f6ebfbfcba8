# -*- coding: utf-8 -*-
"""
backend/tests/integration/__init__.py

Tests de integración End-to-End de UserHub (app completa + sqlite en memoria).

Autor: UserHub
"""
