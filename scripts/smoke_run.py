#!/usr/bin/env python3
"""
Step execution script

Usage:
  python scripts/smoke_run.py list [--api-base-url <url>]
  python scripts/smoke_run.py run --step-id <id> [--data <json> | --data-file <path>]
                                  [--credential-ref env|inline] [--credentials <json>]
                                  [--log-format console|loguru] [--api-base-url <url>]

Examples:
  python scripts/smoke_run.py list
  python scripts/smoke_run.py run --step-id RegistrantFieldEqualsStep --credential-ref env \
      --data '{"organizerKey":"O1","webinarKey":"W1","registrantKey":"R1","field":"email","expectation":"a@b.com"}'
  python scripts/smoke_run.py run --step-id DeleteRegistrantStep --api-base-url http://localhost:8000 \
      --data '{"organizerKey":"O1","webinarKey":"W1","registrantKey":"R1"}'
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import requests
from dotenv import load_dotenv

# プロジェクトルートをPYTHONPATHに追加
sys.path.insert(0, str(Path(__file__).parent.parent))

load_dotenv()

from infrastructure.logging.log_setup import setup_console_logging
setup_console_logging(level="INFO")

from application.executor.handler_registry import HandlerRegistry
from application.executor.step_executor import StepExecutor
from domain.exceptions import ConfigurationError
from domain.steps.base import Step
from infrastructure.bootstrap import build_execution_deps
from infrastructure.config.provider_settings import ProviderSettings
from infrastructure.credentials.dict_credential_provider import DictCredentialProvider
from infrastructure.credentials.env_credential_provider import EnvCredentialProvider
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.loguru_logger import LoguruLogger


DEFAULT_API_TIMEOUT_SEC = 30


def _parse_json_payload(raw: str, label: str) -> dict:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON for {label}: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ValueError(f"{label} must be a JSON object")
    return parsed


def _load_json_file(path: str, label: str) -> dict:
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Unable to read {label} file: {exc}") from exc
    return _parse_json_payload(content, label)


def _load_data_payload(args: argparse.Namespace) -> dict:
    if args.data is not None and args.data_file is not None:
        raise ValueError("Multiple data sources provided")
    if args.data is not None:
        return _parse_json_payload(args.data, "data")
    if args.data_file is not None:
        return _load_json_file(args.data_file, "data")
    return {}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GoTo Webinar step helper")
    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List step definitions")
    list_parser.add_argument("--api-base-url", type=str)

    run_parser = subparsers.add_parser("run", help="Run one step locally or via API")
    run_parser.add_argument("--step-id", type=str, required=True)
    run_parser.add_argument("--data", type=str)
    run_parser.add_argument("--data-file", type=str)
    run_parser.add_argument("--credentials", type=str)
    run_parser.add_argument("--credential-ref", type=str, choices=["inline", "env"], default="env")
    run_parser.add_argument("--api-base-url", type=str)
    run_parser.add_argument("--log-format", type=str, choices=["console", "loguru"], default="console")

    return parser


def _print_json(payload) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2, default=str))


def _list_local() -> int:
    for definition in HandlerRegistry.default().definitions():
        print(f"{definition.step_id}: {definition.name} ({definition.type.value})")
    return 0


def _list_via_api(args: argparse.Namespace) -> int:
    resp = requests.get(f"{args.api_base_url.rstrip('/')}/steps", timeout=DEFAULT_API_TIMEOUT_SEC)
    if resp.status_code != 200:
        print(f"API error: {resp.status_code} {resp.text}")
        return 1
    for definition in resp.json():
        print(f"{definition['step_id']}: {definition['name']} ({definition['type']})")
    return 0


def _credentials(args: argparse.Namespace) -> dict:
    if args.credential_ref == "env":
        return EnvCredentialProvider().get()
    raw = _parse_json_payload(args.credentials, "credentials") if args.credentials else {}
    return DictCredentialProvider(raw).get()


def _run_local(args: argparse.Namespace) -> int:
    data = _load_data_payload(args)
    registry = HandlerRegistry.default()
    step = Step(step_id=args.step_id, data=data)
    try:
        registry.get_handler(step)
        settings = ProviderSettings.from_env()
    except (RuntimeError, ConfigurationError) as e:
        raise ValueError(str(e)) from e

    logger = LoguruLogger() if args.log_format == "loguru" else ConsoleLogger(min_level="info")
    deps = build_execution_deps(_credentials(args), logger, settings)
    outcome = StepExecutor(registry).execute(step, deps)

    print(f"Outcome: {outcome.status.value}")
    print(f"Message: {outcome.message}")
    for record in outcome.records:
        print(f"Record {record.id} ({record.name}):")
        _print_json(record.key_value)
    return 0 if outcome.ok else 1


def _run_via_api(args: argparse.Namespace) -> int:
    body = {
        "data": _load_data_payload(args),
        "credential_ref": args.credential_ref,
    }
    if args.credentials:
        body["credentials"] = _parse_json_payload(args.credentials, "credentials")

    url = f"{args.api_base_url.rstrip('/')}/steps/{args.step_id}/run"
    resp = requests.post(url, json=body, timeout=DEFAULT_API_TIMEOUT_SEC)
    if resp.status_code != 200:
        print(f"API error: {resp.status_code} {resp.text}")
        return 1

    payload = resp.json()
    print(f"Outcome: {payload.get('outcome')}")
    print(f"Message: {payload.get('message')}")
    for record in payload.get("records") or []:
        print(f"Record {record['id']} ({record['name']}):")
        _print_json(record.get("key_value") or {})
    return 0 if payload.get("outcome") == "passed" else 1


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    try:
        if args.command == "list":
            code = _list_via_api(args) if args.api_base_url else _list_local()
        elif args.command == "run":
            code = _run_via_api(args) if args.api_base_url else _run_local(args)
        else:
            parser.print_help()
            code = 2
    except ValueError as e:
        print(f"Error: {e}")
        code = 1

    sys.exit(code)


if __name__ == "__main__":
    main()
