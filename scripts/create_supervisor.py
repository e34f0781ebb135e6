#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
create_supervisor.py

Cria (ou promove) uma conta privilegiada direto no banco.

Uso:
  python3 scripts/create_supervisor.py email@escola.br "Nome Completo" [--admin]

ENV:
  DATABASE_URL, AUTH_SECRET       (mesmas da API)
  SUPERVISOR_PASSWORD=...         (obrigatória ao criar conta nova)
"""

from __future__ import annotations

import argparse
import os

from agenda.core.security import hash_password
from agenda.db.session import SessionLocal
from agenda.models.enums import AuthType, Role
from agenda.models.user import User
from agenda.services.users import get_by_email


def die(msg: str, code: int = 1) -> None:
    print(f"[ERRO] {msg}")
    raise SystemExit(code)


def main() -> None:
    parser = argparse.ArgumentParser(description="Cria ou promove um supervisor")
    parser.add_argument("email")
    parser.add_argument("full_name", nargs="?", default=None)
    parser.add_argument("--admin", action="store_true", help="usa o papel admin em vez de supervisor")
    args = parser.parse_args()

    role = Role.admin if args.admin else Role.supervisor

    db = SessionLocal()
    try:
        user = get_by_email(db, args.email)
        if user:
            user.role = role
            user.active = True
            if args.full_name:
                user.full_name = args.full_name
            db.commit()
            print(f"[OK] {user.email} agora é {role.value}")
            return

        password = os.getenv("SUPERVISOR_PASSWORD")
        if not password:
            die("SUPERVISOR_PASSWORD não definida (necessária para criar conta nova)")

        user = User(
            email=args.email.lower(),
            full_name=args.full_name,
            role=role,
            auth_type=AuthType.local,
            password_hash=hash_password(password),
            active=True,
        )
        db.add(user)
        db.commit()
        print(f"[OK] conta criada: {user.email} ({role.value})")
    finally:
        db.close()


if __name__ == "__main__":
    main()
