#!/usr/bin/env python3
"""
Walk a running Sparq API through the couple journey:

    invite -> accept -> daily question -> both partners answer -> summary

Needs two signed-in test accounts. Put their Supabase access tokens in .env:

    SPARQ_API_URL=http://localhost:8000
    SPARQ_TOKEN_A=<access token of the inviter>
    SPARQ_TOKEN_B=<access token of the invitee>

Both accounts must not be in a couple yet.
"""

import os
import sys

import httpx
from dotenv import load_dotenv

load_dotenv()

API_URL = os.getenv("SPARQ_API_URL", "http://localhost:8000").rstrip("/")


def client_for(token_var: str) -> httpx.Client:
    token = os.getenv(token_var)
    if not token:
        print(f"Missing {token_var} in environment")
        sys.exit(1)
    return httpx.Client(
        base_url=API_URL,
        headers={"Authorization": f"Bearer {token}"},
        timeout=60,
    )


def check(response: httpx.Response, expected: int = 200) -> dict:
    if response.status_code != expected:
        print(f"FAILED {response.request.method} {response.request.url.path}: "
              f"{response.status_code} {response.text}")
        sys.exit(1)
    print(f"  ok {response.request.method} {response.request.url.path} ({response.status_code})")
    return response.json()


def main():
    print(f"\n{'='*60}")
    print(f"SPARQ SMOKE TEST against {API_URL}")
    print(f"{'='*60}")

    check(httpx.get(f"{API_URL}/api/health/ready", timeout=10))

    alex = client_for("SPARQ_TOKEN_A")
    sam = client_for("SPARQ_TOKEN_B")

    print("\n--- INVITATION ---")
    invitation = check(alex.post("/api/invitations"), 201)["invitation"]
    code = invitation["invite_code"]
    print(f"  code: {code}")

    preview = check(sam.get(f"/api/invitations/{code}"))
    print(f"  invited by: {preview.get('inviter_display_name')}")

    couple = check(sam.post("/api/invitations/accept", json={"invite_code": code}), 201)["couple"]
    couple_id = couple["id"]
    print(f"  couple: {couple_id}")

    print("\n--- DAILY QUESTION ---")
    daily = check(alex.get("/api/questions/daily", params={"couple_id": couple_id}))
    question = daily["question"]
    print(f"  question: {question['content']}")

    print("\n--- RESPONSES ---")
    for partner, answer in ((alex, "The way you laugh at my bad jokes."), (sam, "Our Sunday walks.")):
        result = check(
            partner.post("/api/responses", json={"question_id": question["id"], "content": answer}),
            201,
        )
        print(f"  crisis_detected: {result['crisis_detected']}")

    responses = check(sam.get("/api/responses", params={"question_id": question["id"]}))["responses"]
    print(f"  responses visible: {len(responses)}")

    print("\n--- SUMMARY ---")
    summary = check(alex.get(f"/api/couples/{couple_id}/summary"))
    print(f"  health score: {summary['health_score']}")
    print(f"  streak: {summary['streak_message']}")

    print("\nAll steps passed.")


if __name__ == "__main__":
    main()
