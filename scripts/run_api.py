#!/usr/bin/env python3
"""
GuessRight — Запуск API сервера

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --host 127.0.0.1 --port 8000 --data-dir data
"""

import os
import sys
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main():
    parser = argparse.ArgumentParser(description='GuessRight API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--data-dir', default=None, help='Directory with profiles.json / questions.json')
    parser.add_argument('--config', default=None, help='YAML config for the engine')

    args = parser.parse_args()

    # Налаштування передаються через env, бо API читає їх при імпорті
    os.environ["API_HOST"] = args.host
    os.environ["API_PORT"] = str(args.port)
    if args.data_dir:
        os.environ["DATA_DIR"] = str(Path(args.data_dir).resolve())
    if args.config:
        os.environ["GUESSRIGHT_CONFIG"] = str(Path(args.config).resolve())

    print("=" * 60)
    print("🎯 GuessRight — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print(f"   Data: {args.data_dir or 'auto'}")
    print("=" * 60)

    import uvicorn

    uvicorn.run(
        "guess_right.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
