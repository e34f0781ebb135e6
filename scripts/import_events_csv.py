#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
import_events_csv.py

Envia eventos de um CSV para a API (cada linha vira um evento pendente
do dono do token).

Colunas esperadas:
  titulo, tipo, inicio, fim            (datas dd/mm/aaaa ou aaaa-mm-dd)
Opcionais:
  descricao, dia_todo (sim/nao), hora_inicio, hora_fim (HH:MM)

ENV:
  API_BASE_URL=http://127.0.0.1:8000
  ACCESS_TOKEN=...                 (token do /api/auth/login-local)
  CSV_PATH=eventos.csv
  REQUEST_TIMEOUT=30
"""

from __future__ import annotations

import csv
import os
from datetime import date, datetime
from typing import Any, Dict, Optional

import requests
from dotenv import load_dotenv

load_dotenv()


def die(msg: str, code: int = 1) -> None:
    print(f"[ERRO] {msg}")
    raise SystemExit(code)


def env_required(name: str) -> str:
    v = os.getenv(name)
    if not v:
        die(f"Variável de ambiente obrigatória não definida: {name}")
    return v


def parse_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"sim", "true", "1", "yes", "y"}


def parse_date(value: str) -> date:
    s = (value or "").strip()
    for fmt in ("%d/%m/%Y", "%Y-%m-%d", "%Y/%m/%d"):
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"data inválida: {value!r}")


def row_to_payload(row: Dict[str, str]) -> Dict[str, Any]:
    all_day = parse_bool(row.get("dia_todo"))
    payload: Dict[str, Any] = {
        "title": (row.get("titulo") or "").strip(),
        "event_type": (row.get("tipo") or "Evento").strip(),
        "start_date": parse_date(row["inicio"]).isoformat(),
        "end_date": parse_date(row.get("fim") or row["inicio"]).isoformat(),
        "all_day": all_day,
        "description": (row.get("descricao") or "").strip() or None,
    }
    if not all_day:
        payload["start_time"] = (row.get("hora_inicio") or "").strip() or None
        payload["end_time"] = (row.get("hora_fim") or "").strip() or None
    return payload


def main() -> None:
    base_url = os.getenv("API_BASE_URL", "http://127.0.0.1:8000").rstrip("/")
    token = env_required("ACCESS_TOKEN")
    csv_path = os.getenv("CSV_PATH", "eventos.csv")
    timeout = int(os.getenv("REQUEST_TIMEOUT", "30"))

    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }

    ok = 0
    failed = 0
    with open(csv_path, newline="", encoding="utf-8") as csvfile:
        for line_no, row in enumerate(csv.DictReader(csvfile), start=2):
            try:
                payload = row_to_payload(row)
            except (KeyError, ValueError) as e:
                print(f"[PULADO] linha {line_no}: {e}")
                failed += 1
                continue

            resp = requests.post(f"{base_url}/api/events/create", json=payload, headers=headers, timeout=timeout)
            if resp.status_code == 201:
                ok += 1
            else:
                failed += 1
                print(f"[ERRO] linha {line_no}: {resp.status_code} {resp.text}")

    print(f"Enviados: {ok} | Falhas: {failed}")


if __name__ == "__main__":
    main()
