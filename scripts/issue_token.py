#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
backend/scripts/issue_token.py

Emite un JWT de acceso firmado con la configuración activa
(JWT_SECRET_KEY / JWT_ALGORITHM), para probar la API en local.

Uso:
    python scripts/issue_token.py 315e0834-e96d-4ddc-9974-726e8c1e9cf9 --email jane@example.com
    python scripts/issue_token.py <user_id> --minutes 5

Autor: UserHub
Fecha: 2026-09-02
"""

import argparse
import sys
from datetime import timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from dotenv import load_dotenv  # noqa: E402

load_dotenv(Path(__file__).resolve().parents[1] / ".env")

from app.modules.auth import create_access_token  # noqa: E402


def main() -> int:
    parser = argparse.ArgumentParser(description="Emitir un JWT de acceso para UserHub")
    parser.add_argument("user_id", help="Valor de los claims user_id/sub")
    parser.add_argument("--email", default=None, help="Claim email opcional")
    parser.add_argument("--minutes", type=int, default=None, help="Minutos de vigencia (por defecto: settings)")
    args = parser.parse_args()

    expires = timedelta(minutes=args.minutes) if args.minutes else None
    print(create_access_token(args.user_id, email=args.email, expires_delta=expires))
    return 0


if __name__ == "__main__":
    sys.exit(main())
