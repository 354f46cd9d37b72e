"""
FastAPI application exporting Challonge tournaments as CSV.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from src import config
from src.challonge.client import ChallongeClient
from src.challonge.service import fetch_event
from src.export.csv_export import matches_to_csv, player_stats_to_csv, safe_filename
from src.scoring.engine import calculate_player_points
from src.web.models import ErrorResponse, PlayerStatsRow, PointsResponse

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Challonge Points",
    description="Export Challonge tournaments and event points tables as CSV",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_headers=["Content-Type", "Authorization"],
    allow_methods=["GET", "PUT", "POST", "DELETE"],
    allow_credentials=True,
)


def create_client(api_key: str) -> ChallongeClient:
    """Build a client for one request."""
    return ChallongeClient(api_key)


def _error(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}.csv"',
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "GET, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type, Authorization, Authorization-Type",
            "Access-Control-Expose-Headers": "Content-Disposition",
        }
    )


def _resolve_api_key(api_key: Optional[str]) -> Optional[str]:
    return api_key or config.API_KEY or None


def _export(
    tournament_id: str,
    community_id: Optional[str],
    api_key: Optional[str],
    points: bool,
    output_format: str = "csv"
):
    """Fetch, optionally score, and render one tournament."""
    key = _resolve_api_key(api_key)
    if not key:
        return _error(401, "API key is required")

    kind = "community tournament" if community_id else "tournament"
    if points:
        kind += " points"

    try:
        tournament, matches = fetch_event(create_client(key), tournament_id, community_id)

        if community_id:
            name = tournament.name or f"Community_Tournament_{tournament_id}"
            filename = f"Community_{community_id}_{safe_filename(name)}"
        else:
            name = tournament.name or f"Tournament_{tournament_id}"
            filename = safe_filename(name)

        if not points:
            return _csv_response(matches_to_csv(matches), filename)

        stats = calculate_player_points(tournament.id, matches)
        if output_format == "json":
            return PointsResponse(
                event_id=tournament.id,
                event_name=name,
                players=[PlayerStatsRow.from_stats(s) for s in stats]
            )
        return _csv_response(player_stats_to_csv(stats), f"{filename}_Points")
    except Exception as e:
        logger.exception("Failed to process %s %s", kind, tournament_id)
        return _error(500, f"Failed to process {kind} data", str(e))


# =============================================================================
# Info Endpoints
# =============================================================================

@app.get("/", response_class=PlainTextResponse)
def index():
    """Service greeting."""
    return "Hello Challonge to CSV"


@app.get("/success", response_class=PlainTextResponse)
def success():
    """Landing page after authentication."""
    return "Authentication successful! You can now use the CSV export features."


# =============================================================================
# Export Endpoints
# =============================================================================

@app.get("/simple-brackets/{tournament_id}")
def export_matches(tournament_id: str, apiKey: Optional[str] = None):
    """Export every match of a tournament as CSV."""
    return _export(tournament_id, None, apiKey, points=False)


@app.get("/simple-brackets/{tournament_id}/points")
def export_points(
    tournament_id: str,
    apiKey: Optional[str] = None,
    format: str = Query(default="csv", pattern="^(csv|json)$")
):
    """Export the points table of a tournament."""
    return _export(tournament_id, None, apiKey, points=True, output_format=format)


@app.get("/simple-brackets/{tournament_id}/community/{community_id}")
def export_community_matches(tournament_id: str, community_id: str, apiKey: Optional[str] = None):
    """Export every match of a community tournament as CSV."""
    return _export(tournament_id, community_id, apiKey, points=False)


@app.get("/simple-brackets/{tournament_id}/community/{community_id}/points")
def export_community_points(
    tournament_id: str,
    community_id: str,
    apiKey: Optional[str] = None,
    format: str = Query(default="csv", pattern="^(csv|json)$")
):
    """Export the points table of a community tournament."""
    return _export(tournament_id, community_id, apiKey, points=True, output_format=format)
