"""
Web application module for the Soccer Rotation Planner.

This module contains the Flask web server that provides JSON API endpoints
for attendance, the competitive balance knob, schedule generation,
substitutions and the play time report, plus the HTML page that drives them.
"""
import logging
import os
from typing import Any, Dict, List, Optional

from flask import Flask, Response, jsonify, request, send_from_directory
from werkzeug.exceptions import HTTPException

from ..models import PlayerReport, RotationState, Schedule, Slot, SubstitutionPair
from ..models import PlayTimeSummary, Roster
from ..services import RotationPlannerError, ServiceFactory
from ..utils import APP_TITLE, format_minute, fmt_slot_heading

logger = logging.getLogger(__name__)

STATIC_FOLDER = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")


class WebAppState:
    """
    State holder for the web application.

    Uses dependency injection and service factory following SOLID principles.
    """

    def __init__(self, roster: Optional[Roster] = None, roster_path: Optional[str] = None):
        self.service_factory = ServiceFactory()
        roster_service = self.service_factory.get_roster_service()
        if roster is None:
            roster = (
                roster_service.load_from_file(roster_path)
                if roster_path
                else roster_service.default_roster()
            )
        self.state = RotationState.for_roster(roster)

        services = self.service_factory.create_complete_service_suite(self.state)
        self.rotation_service = services['rotation']
        self.analytics_service = services['analytics']


def _serialize_slot(schedule: Schedule, slot: Slot) -> Dict[str, Any]:
    start, end = schedule.slot_window(slot.index)
    data = slot.to_dict()
    data.update({
        "start_minute": start,
        "end_minute": end,
        "heading": fmt_slot_heading(start, end),
    })
    return data


def _serialize_substitutions(pairs: List[SubstitutionPair]) -> List[Dict[str, Any]]:
    return [
        {
            "in": pair.player_in.to_dict(),
            "out": pair.player_out.to_dict(),
            "label": f"{pair.player_in.name} replaces {pair.player_out.name}",
        }
        for pair in pairs
    ]


def _serialize_report(report: PlayerReport, total_game_minutes: int) -> Dict[str, Any]:
    def intervals(values):
        return [
            {
                "start": interval.start,
                "end": interval.end,
                "start_label": format_minute(interval.start, total_game_minutes),
                "end_label": format_minute(interval.end, total_game_minutes),
            }
            for interval in values
        ]

    return {
        **report.player.to_dict(),
        "total_play_time": report.total_play_time,
        "field_times": intervals(report.field_times),
        "sideline_times": intervals(report.sideline_times),
    }


def _serialize_summary(summary: PlayTimeSummary) -> Dict[str, Any]:
    return {
        "present_count": summary.present_count,
        "target_minutes_per_player": round(summary.target_minutes_per_player, 2),
        "average_minutes": round(summary.average_minutes, 2),
        "median_minutes": summary.median_minutes,
        "min_minutes": summary.min_minutes,
        "max_minutes": summary.max_minutes,
        "spread_minutes": summary.spread_minutes,
        "fairness_counts": summary.fairness_counts,
        "players": [
            {
                "id": item.player.id,
                "name": item.player.name,
                "play_minutes": item.play_minutes,
                "slots_played": item.slots_played,
                "delta_minutes": round(item.delta_minutes, 2),
                "fairness": item.fairness,
            }
            for item in summary.players
        ],
    }


def create_app(app_state: Optional[WebAppState] = None, static_folder: str = STATIC_FOLDER) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        app_state: Session state to serve; a fresh one using the default
            roster is created when omitted
        static_folder: Directory holding the HTML interface

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__, static_folder=static_folder, static_url_path="")
    app_state = app_state or WebAppState()
    app.config["APP_STATE"] = app_state

    def _error(message: str, status: int):
        return jsonify({"success": False, "error": message}), status

    @app.errorhandler(RotationPlannerError)
    def handle_planner_error(e: RotationPlannerError):
        return _error(str(e), 400)

    @app.errorhandler(ValueError)
    def handle_value_error(e: ValueError):
        return _error(str(e), 400)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error while serving %s", request.path)
        return _error(str(e), 500)

    def _schedule_payload(schedule: Schedule) -> Dict[str, Any]:
        return {
            "competitive_balance": schedule.competitive_balance,
            "total_game_minutes": schedule.total_game_minutes,
            "rotation_minutes": schedule.rotation_minutes,
            "present_players": [p.to_dict() for p in schedule.present_players],
            "slots": [_serialize_slot(schedule, slot) for slot in schedule.slots],
        }

    @app.route("/")
    def index():
        """Serve the main HTML interface."""
        response = send_from_directory(static_folder, "index.html")
        response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
        return response

    # ==================== API Endpoints ==================== #

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """Get roster, attendance and settings."""
        return jsonify({"success": True, "title": APP_TITLE, **app_state.state.to_json()})

    @app.route("/api/attendance/<int:player_id>", methods=["POST"])
    def update_attendance(player_id: int):
        """Toggle attendance, or set it explicitly with ``{"present": bool}``."""
        data = request.get_json(silent=True) or {}
        service = app_state.rotation_service
        try:
            if "present" in data:
                present = data["present"]
                if not isinstance(present, bool):
                    return _error("present must be true or false", 400)
                service.set_attendance(player_id, present)
            else:
                present = service.toggle_attendance(player_id)
        except KeyError:
            return _error("Player not found", 404)
        return jsonify({"success": True, "player_id": player_id, "present": present})

    @app.route("/api/balance", methods=["POST"])
    def update_balance():
        """Set the competitive balance knob."""
        data = request.get_json(silent=True) or {}
        if "competitive_balance" not in data:
            return _error("competitive_balance is required", 400)
        app_state.rotation_service.set_competitive_balance(data["competitive_balance"])
        return jsonify({
            "success": True,
            "competitive_balance": app_state.state.competitive_balance,
        })

    @app.route("/api/schedule", methods=["POST"])
    def generate_schedule():
        """Generate a rotation schedule for the present players."""
        schedule = app_state.rotation_service.generate_schedule()
        return jsonify({"success": True, "schedule": _schedule_payload(schedule)})

    @app.route("/api/schedule", methods=["GET"])
    def get_schedule():
        """Return the last generated schedule."""
        schedule = app_state.rotation_service.require_schedule()
        return jsonify({"success": True, "schedule": _schedule_payload(schedule)})

    @app.route("/api/schedule/<int:index>/substitutions", methods=["GET"])
    def get_substitutions(index: int):
        """Substitutions made at the start of one slot."""
        try:
            pairs = app_state.rotation_service.substitutions(index)
        except IndexError as e:
            return _error(str(e), 404)
        return jsonify({
            "success": True,
            "index": index,
            "substitutions": _serialize_substitutions(pairs),
        })

    @app.route("/api/report", methods=["GET"])
    def get_report():
        """Play time report for the current schedule."""
        reports = app_state.rotation_service.generate_report()
        schedule = app_state.state.schedule
        summary = app_state.analytics_service.summarize(reports, schedule)
        return jsonify({
            "success": True,
            "players": [_serialize_report(r, schedule.total_game_minutes) for r in reports],
            "summary": _serialize_summary(summary),
        })

    @app.route("/api/report/export", methods=["GET"])
    def export_report():
        """Download the play time report as CSV."""
        reports = app_state.rotation_service.generate_report()
        csv_text = app_state.analytics_service.generate_report_csv(
            reports, app_state.state.schedule
        )
        return Response(
            csv_text,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=play_time_report.csv"},
        )

    return app


def run_web_app(host: str = "127.0.0.1", port: int = 7122, roster_path: Optional[str] = None) -> None:
    """
    Run the web application.

    Args:
        host: Host address to bind to (default: localhost only)
        port: Port number to listen on
        roster_path: Optional JSON roster file; the default roster is used otherwise
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(WebAppState(roster_path=roster_path))
    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    run_web_app(roster_path=os.environ.get("SOCCER_ROTATION_ROSTER"))
