"""Lightweight REST client for the pitchside API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_roster(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid roster JSON: {exc}") from exc
    if isinstance(data, list):
        return {"players": data}
    return data


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pitchside REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--fixture", metavar="FIXTURE_ID", help="Fetch the pitch layout for a fixture")
    parser.add_argument("--roster", type=Path, help="Post a roster JSON file to /layout")
    parser.add_argument("--formation", default=None, help="Formation to send with --roster")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.get("/health")
        resp.raise_for_status()
        print("Health:", resp.json()["status"])

        if args.fixture:
            resp = client.get(f"/fixture/{args.fixture}/layout")
            if resp.status_code == 404:
                raise SystemExit(f"fixture {args.fixture} not found")
            resp.raise_for_status()
            print(json.dumps(resp.json()["data"], indent=2))

        if args.roster:
            payload = load_roster(args.roster)
            if args.formation:
                payload["formation"] = args.formation
            resp = client.post("/layout", json=payload)
            resp.raise_for_status()
            layout = resp.json()
            print(f"Placed {len(layout['players'])} players")
            print(json.dumps(layout, indent=2))


if __name__ == "__main__":
    main()
