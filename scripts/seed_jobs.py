"""
Seed script: submits a handful of print jobs and walks them through the
printer's lifecycle, for demo purposes.

Usage:
    uvicorn api.main:app &
    python -m scripts.seed_jobs

This:
- submits 4 jobs with mixed priorities
- dispatches the most urgent one
- blocks it (the next one is auto-filled onto the printer)
- prints the scheduler status after each step
"""

import httpx

BASE_URL = "http://localhost:8000"


def _show(client: httpx.Client, label: str) -> None:
    status = client.get("/scheduler/status").json()
    print(
        f"  {label:<10} ready={status['ready']} blocked={status['blocked']} "
        f"executing={status['executing']}"
    )


def seed():
    client = httpx.Client(base_url=BASE_URL, timeout=10.0)

    jobs = [
        {"name": "quarterly-report.pdf", "priority": 3, "estimated_duration": 12},
        {"name": "boarding-pass.pdf", "priority": 1, "estimated_duration": 1, "owner": "alice"},
        {"name": "invoice-0042.pdf", "priority": 2, "estimated_duration": 3, "owner": "bob"},
        {"name": "poster-a2.png", "priority": 5, "estimated_duration": 20},
    ]

    print(f"Submitting {len(jobs)} jobs to {BASE_URL}...\n")

    for job in jobs:
        resp = client.post("/jobs/", json=job)
        resp.raise_for_status()
        data = resp.json()
        print(f"  [{data['status']}] #{data['id']} {data['name']} (priority {data['priority']})")

    print()
    _show(client, "submitted")

    client.post("/scheduler/execute").raise_for_status()
    _show(client, "execute")

    client.post("/scheduler/block").raise_for_status()
    _show(client, "block")

    print("\nDone! Try:  curl -X POST http://localhost:8000/scheduler/unblock")


if __name__ == "__main__":
    seed()
