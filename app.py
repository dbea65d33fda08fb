from flask import Flask, Blueprint, current_app, request, jsonify
import logging

from config import get_config
from constants import MAX_INGREDIENT_LINES
from models import UnitSystem
from services import (
    clamp_servings,
    get_descriptors,
    parse_ingredients,
    format_recipe,
    build_copy_text,
    build_preview_text,
)
from utils.sanitizer import sanitize_recipe_name, sanitize_ingredient_text

api = Blueprint('api', __name__, url_prefix='/api')


class RequestError(Exception):
    """Raised when a request body cannot be used."""


def handle_bad_request(e):
    current_app.logger.info("Rejected request to %s: %s", request.path, e)
    return jsonify({'error': str(e)}), 400


# ============================================
# HELPERS
# ============================================

def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value else default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError, OverflowError):
        return default


def get_json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise RequestError('Request body must be a JSON object')
    return data


def get_lines(data):
    """Return the sanitized ingredient lines from a request body."""
    lines = data.get('lines')
    if not isinstance(lines, list):
        raise RequestError("'lines' must be a list of strings")
    if len(lines) > MAX_INGREDIENT_LINES:
        raise RequestError(f"At most {MAX_INGREDIENT_LINES} lines are accepted")
    return [sanitize_ingredient_text(line) for line in lines]


def get_unit_system(data):
    try:
        return UnitSystem.coerce(data.get('unit_system', 'us'))
    except ValueError as e:
        raise RequestError(str(e))


def get_servings_range():
    return current_app.config['SERVINGS_MIN'], current_app.config['SERVINGS_MAX']


def get_servings(data):
    return clamp_servings(safe_int(data.get('servings'), default=1), *get_servings_range())


def get_request_descriptors(data):
    return get_descriptors(data.get('domain'), current_app.config['DEFAULT_DESCRIPTOR_SET'])


def engine_options():
    """Config values the measurement services take per call."""
    return {
        'dash_to_ml': current_app.config['DASH_TO_ML'],
        'servings_range': get_servings_range(),
    }


# ============================================
# ROUTES - API
# ============================================

@api.route('/health')
def health():
    return jsonify({'status': 'ok'})


@api.route('/measurements/parse', methods=['POST'])
def measurements_parse():
    """Parse raw ingredient lines into structured measurements."""
    data = get_json_body()
    lines = get_lines(data)
    descriptors = get_request_descriptors(data)

    measurements = parse_ingredients(lines, descriptors)
    return jsonify({'measurements': [m.to_dict() for m in measurements]})


@api.route('/measurements/format', methods=['POST'])
def measurements_format():
    """Scale and convert ingredient lines for display."""
    data = get_json_body()
    lines = get_lines(data)
    servings = get_servings(data)
    unit_system = get_unit_system(data)
    descriptors = get_request_descriptors(data)

    displayed = format_recipe(lines, servings, unit_system, descriptors, **engine_options())
    current_app.logger.debug("Formatted %d lines (servings=%d, %s)", len(lines), servings, unit_system.value)
    return jsonify({
        'servings': servings,
        'unit_system': unit_system.value,
        'measurements': [d.to_dict() for d in displayed],
    })


@api.route('/recipes/copy-text', methods=['POST'])
def recipe_copy_text():
    """Build clipboard and share text for a recipe card."""
    data = get_json_body()
    name = sanitize_recipe_name(data.get('name'))
    lines = get_lines(data)
    servings = get_servings(data)
    unit_system = get_unit_system(data)
    descriptors = get_request_descriptors(data)
    options = engine_options()

    return jsonify({
        'text': build_copy_text(name, lines, servings, unit_system, descriptors, **options),
        'preview': build_preview_text(name, lines, servings, unit_system, descriptors=descriptors, **options),
    })


def create_app(env=None):
    """Create the Flask app with the configuration for `env` (FLASK_ENV by default)."""
    app = Flask(__name__)
    app.config.from_object(get_config(env))
    app.register_blueprint(api)
    app.register_error_handler(RequestError, handle_bad_request)
    return app


app = create_app()


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG if app.config.get('DEBUG') else logging.INFO)
    app.run(debug=app.config.get('DEBUG', False))
