#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
backend/scripts/validate_openapi.py

Script de validación de OpenAPI para verificar que todas las rutas
cumplen con los estándares establecidos:

1. Todas las rutas (salvo health/metrics) comienzan con el prefijo de la API
2. No hay duplicados (path+method)
3. Todos los tags pertenecen al catálogo oficial

Uso:
    python scripts/validate_openapi.py                 # spec de la app en proceso
    python scripts/validate_openapi.py --url http://localhost:8000

Autor: UserHub
Fecha: 2026-09-02
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

import httpx

# Tags oficiales del catálogo
OFFICIAL_TAGS = {"User", "Health"}
PREFIX_EXEMPT = {"/", "/health", "/metrics"}


def fetch_openapi_spec(base_url: Optional[str]) -> Dict:
    """Obtiene el spec OpenAPI del servidor o de la app importada."""
    if base_url is None:
        sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
        from app.main import app

        return app.openapi()
    try:
        response = httpx.get(f"{base_url.rstrip('/')}/openapi.json", timeout=10.0)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPError as e:
        print(f"❌ Error al obtener OpenAPI spec: {e}")
        sys.exit(1)


def validate_api_prefix(paths: Dict, prefix: str) -> List[str]:
    """Valida que todas las rutas comiencen con el prefijo de la API."""
    return [
        f"Ruta sin prefijo {prefix}: {path}"
        for path in paths
        if path not in PREFIX_EXEMPT and not path.startswith(prefix + "/")
    ]


def validate_no_duplicates(paths: Dict) -> List[str]:
    """Valida que no haya duplicados de path+method."""
    errors = []
    seen = set()

    for path, methods in paths.items():
        for method in methods:
            if method == "parameters":  # Skip metadata
                continue
            key = f"{method.upper()}:{path}"
            if key in seen:
                errors.append(f"Ruta duplicada: {method.upper()} {path}")
            seen.add(key)

    return errors


def validate_official_tags(paths: Dict) -> Tuple[List[str], Set[str]]:
    """Valida que todos los tags sean oficiales."""
    errors = []
    unofficial_tags = set()

    for path, methods in paths.items():
        for method, details in methods.items():
            if method == "parameters":
                continue
            for tag in details.get("tags", []):
                if tag not in OFFICIAL_TAGS:
                    unofficial_tags.add(tag)
                    errors.append(f"Tag no oficial en {method.upper()} {path}: '{tag}'")

    return errors, unofficial_tags


def generate_report(spec: Dict, prefix: str) -> int:
    """Genera reporte de validación en consola; devuelve el exit code."""
    print("=" * 80)
    print("🔍 VALIDACIÓN DE OPENAPI - UserHub")
    print("=" * 80)

    paths = spec.get("paths", {})
    total_endpoints = sum(
        len([m for m in methods if m != "parameters"]) for methods in paths.values()
    )
    print(f"📊 Paths: {len(paths)} · Endpoints: {total_endpoints}\n")

    tag_errors, _ = validate_official_tags(paths)
    checks = [
        (f"Prefijo {prefix}", validate_api_prefix(paths, prefix)),
        ("Duplicados", validate_no_duplicates(paths)),
        ("Tags oficiales", tag_errors),
    ]

    all_errors = []
    for title, errors in checks:
        if errors:
            all_errors.extend(errors)
            print(f"   ❌ {title}: {len(errors)} errores")
            for error in errors:
                print(f"      - {error}")
        else:
            print(f"   ✅ {title}")

    print("=" * 80)
    if all_errors:
        print(f"❌ VALIDACIÓN FALLIDA: {len(all_errors)} errores encontrados")
        return 1
    print("✅ VALIDACIÓN EXITOSA: Todos los checks pasaron")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Validar el OpenAPI de UserHub")
    parser.add_argument("--url", default=None, help="Base URL del servidor (por defecto: app en proceso)")
    parser.add_argument("--prefix", default="/api/v1", help="Prefijo esperado de la API")
    args = parser.parse_args()

    spec = fetch_openapi_spec(args.url)
    return generate_report(spec, args.prefix.rstrip("/"))


if __name__ == "__main__":
    sys.exit(main())
