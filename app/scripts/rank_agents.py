#!/usr/bin/env python3
"""Rank agents for a single inquiry from the command line.

Usage:
    python -m app.scripts.rank_agents --customer "John Doe" \\
        --communication-method Text --lead-source Organic \\
        --destination Mars --launch-location "Dallas-Fort Worth Launch Complex"

Exit codes:
    0  — ranking printed
    1  — invalid inquiry or the data source could not be read
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from app.core.config import settings
from app.core.database import AsyncSessionLocal, engine
from app.core.exceptions import AgentRankingError
from app.repositories.snapshot_repository import SnapshotRepository
from app.schemas.ranking import RankingResponse, ScoringWeights
from app.services.agent_ranking import AgentRankingService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recommend the best-fit agent for a customer inquiry."
    )
    parser.add_argument("--customer", dest="customer_name", required=True)
    parser.add_argument("--communication-method", required=True)
    parser.add_argument("--lead-source", required=True)
    parser.add_argument("--destination", required=True)
    parser.add_argument("--launch-location", required=True)
    parser.add_argument(
        "--top", type=int, default=None, help="Only print the first N agents"
    )
    return parser


def format_ranking(response: RankingResponse, top: Optional[int] = None) -> str:
    """Render a ranking as a fixed-width text table."""
    lines = [f"Ranking for {response.customer_name}"]
    if response.returning_agent_id is not None:
        lines.append(f"Returning customer → agent {response.returning_agent_id}")
    lines.append(f"{'#':>3}  {'Agent':<28}{'Score':>10}")
    rows = response.results if top is None else response.results[:top]
    for row in rows:
        name = f"{row.first_name} {row.last_name} ({row.agent_id})"
        marker = " *" if row.is_returning_match else ""
        lines.append(f"{row.rank:>3}  {name:<28}{row.score:>10.4f}{marker}")
    return "\n".join(lines)


async def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    inquiry = {
        "customer_name": args.customer_name,
        "communication_method": args.communication_method,
        "lead_source": args.lead_source,
        "destination": args.destination,
        "launch_location": args.launch_location,
    }

    try:
        service = AgentRankingService(ScoringWeights.from_settings(settings))
        async with AsyncSessionLocal() as session:
            result, snapshot = await service.rank(inquiry, SnapshotRepository(session))
    except AgentRankingError as exc:
        print(f"ERROR: {exc.detail}", file=sys.stderr)
        return 1
    finally:
        await engine.dispose()

    print(format_ranking(service.to_response(result, snapshot), top=args.top))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    sys.exit(asyncio.run(run()))
