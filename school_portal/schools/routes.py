# school_portal/schools/routes.py
# School directory, per-school landing pages and the JSON endpoints.

from flask import render_template, abort, current_app, jsonify

from school_portal import get_store
from ..errors import InternalError, NotFound, Unavailable
from . import schools_bp
from .content import as_list
from .landing import build_landing
from .listing import list_schools
from .records import to_summary
from .resolver import resolve_school

INTERNAL_ERROR_BODY = {"error": "Internal Server Error"}

schools_bp.add_app_template_filter(as_list, "as_list")


@schools_bp.route('/')
def index():
    """Directory of all schools."""
    try:
        schools = list_schools(get_store())
    except InternalError as e:
        current_app.logger.exception(f"[schools.index] listing failed: {e}")
        abort(500)
    return render_template('index.html', schools=schools)


@schools_bp.route('/<slug>')
def landing(slug):
    """
    Landing page of one school.
    Any lookup failure ends in the same 404 page; the cause only goes to the log.
    """
    try:
        page = build_landing(get_store(), slug)
    except NotFound as e:
        current_app.logger.warning(f"[schools.landing] slug={slug!r} reason={e.reason}: {e}")
        abort(404)
    return render_template('school_landing.html', **page)


@schools_bp.route('/api/schools', methods=['GET'])
def api_list():
    try:
        return jsonify(list_schools(get_store())), 200
    except Exception as e:
        current_app.logger.exception(f"[schools.api_list] Error fetching schools data: {e}")
        return jsonify(INTERNAL_ERROR_BODY), 500


@schools_bp.route('/api/schools/<subdomain>', methods=['GET'])
def api_detail(subdomain):
    try:
        school = resolve_school(get_store(), subdomain)
    except NotFound as e:
        if e.reason == "unavailable":
            current_app.logger.error(f"[schools.api_detail] store unavailable: {e.__cause__}")
            return jsonify(INTERNAL_ERROR_BODY), 500
        return jsonify({"error": "School not found"}), 404
    return jsonify(to_summary(school)), 200


@schools_bp.route('/api/ping', methods=['GET'])
def ping():
    try:
        get_store().ping()
    except Unavailable as e:
        current_app.logger.error(f"[schools.ping] {e}")
        return jsonify({"status": "unavailable"}), 503
    return jsonify({"status": "ok"}), 200
