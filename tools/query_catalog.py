#!/usr/bin/env python3
import json
import argparse
from pathlib import Path

import requests

API_URL = "http://127.0.0.1:3000"

def get_json(base, path, **params):
    r = requests.get(f"{base}{path}", params=params, timeout=15)
    data = r.json()
    if r.status_code >= 400 or not data.get("success"):
        raise SystemExit(f"{path} -> {r.status_code}: {data.get('error')}")
    return data

def walk(base, brand=None, model=None, version=None):
    """
    Drill down as far as the arguments allow:
    brands, then models of --brand, versions of --model, auto-info of --version.
    """
    if not brand:
        return get_json(base, "/api/brands")
    if not model:
        return get_json(base, "/api/models", brand=brand)
    if not version:
        return get_json(base, "/api/versions", brand=brand, model=model)
    return get_json(base, "/api/auto-info", brand=brand, model=model, version=version)

def main():
    parser = argparse.ArgumentParser(description="Query a running catalog API and print the JSON.")
    parser.add_argument("--base", default=API_URL)
    parser.add_argument("--brand", default=None, help='e.g. "AUDI"')
    parser.add_argument("--model", default=None, help='e.g. "A1"')
    parser.add_argument("--version", default=None, help='e.g. "1.4 TFSi MT"')
    parser.add_argument("--pairs", action="store_true", help="list model-version pairs for --brand")
    parser.add_argument("--out", default=None, help="also write the JSON to this file")
    args = parser.parse_args()

    if args.pairs:
        if not args.brand:
            parser.error("--pairs needs --brand")
        data = get_json(args.base, "/api/model-versions", brand=args.brand)
    else:
        data = walk(args.base, args.brand, args.model, args.version)

    text = json.dumps(data, indent=2, ensure_ascii=False)
    print(text)
    if args.out:
        out_path = Path(args.out).resolve()
        out_path.write_text(text, encoding="utf-8")
        print(f"✅ Wrote JSON to: {out_path}")

if __name__ == "__main__":
    main()
